from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import verify_token
from app.core.session import SessionEvents
from app.models.profile import Profile, UserType
from app.models.user import User
from app.services.user import UserService

security = HTTPBearer()


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> User:
    """Get current authenticated user"""
    token = credentials.credentials
    user_id = verify_token(token)

    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = UserService.get_user(db, user_id=int(user_id))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )

    return user


def get_current_profile(
    current_user: User = Depends(get_current_user),
) -> Profile:
    """Get the profile of the current user"""
    if current_user.profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return current_user.profile


def require_freelancer(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    """Require a freelancer account"""
    if current_profile.user_type != UserType.FREELANCER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Freelancer account required"
        )
    return current_profile


def require_client(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    """Require a client account"""
    if current_profile.user_type != UserType.CLIENT:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Client account required"
        )
    return current_profile


def get_session_events(request: Request) -> SessionEvents:
    return request.app.state.session_events
