import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import BackendError, ValidationFailed
from app.core.security import get_password_hash, verify_password
from app.models.profile import ClientProfile, FreelancerProfile, Profile, UserType
from app.models.user import User
from app.schemas.auth import SignUpRequest

logger = logging.getLogger(__name__)


def validate_sign_up(data: SignUpRequest) -> None:
    """Form rules checked before anything touches the database"""
    if data.password != data.confirm_password:
        raise ValidationFailed("Passwords do not match")
    if len(data.password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationFailed(
            f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long"
        )


class UserService:
    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def sign_up(db: Session, data: SignUpRequest) -> User:
        """Create the account, its profile and the role-specific extension"""
        validate_sign_up(data)

        email = data.email.lower()
        if UserService.get_user_by_email(db, email):
            raise BackendError("User already registered")

        db_user = User(email=email, hashed_password=get_password_hash(data.password), is_active=True)
        db.add(db_user)
        try:
            db.flush()
            db.add(Profile(
                id=db_user.id,
                user_type=data.user_type,
                full_name=data.full_name,
                email=email,
            ))
            if data.user_type == UserType.FREELANCER:
                db.add(FreelancerProfile(id=db_user.id, skills=[]))
            else:
                db.add(ClientProfile(id=db_user.id))
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Sign up for %s failed: %s", email, exc.orig)
            raise BackendError("User already registered") from exc

        db.refresh(db_user)
        logger.info("Registered %s account %s", data.user_type.value, db_user.id)
        return db_user

    @staticmethod
    def authenticate_user(db: Session, email: str, password: str) -> User:
        """Authenticate user by email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user or not verify_password(password, user.hashed_password):
            raise BackendError("Invalid login credentials", status_code=401)
        return user

    @staticmethod
    def deactivate_user(db: Session, user_id: int) -> bool:
        db_user = UserService.get_user(db, user_id)
        if not db_user:
            return False
        db_user.is_active = False
        db.commit()
        return True
