import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models.application import Application
from app.models.dispute import DisputeResolution
from app.models.file_attachment import FileAttachment
from app.models.preferences import UserPreferences
from app.models.profile import ClientProfile, FreelancerProfile, Profile
from app.models.project import Project
from app.models.review import Review
from app.models.saved_project import SavedProject
from app.models.subscription import Subscription
from app.models.time_tracking import TimeTracking
from app.models.user import User
from app.schemas.profile import ClientProfileUpdate, FreelancerProfileUpdate, ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    @staticmethod
    def get_profile(db: Session, user_id: int) -> Optional[Profile]:
        """Get profile by user ID"""
        return db.query(Profile).filter(Profile.id == user_id).first()

    @staticmethod
    def update_profile(db: Session, user_id: int, profile_update: ProfileUpdate) -> Optional[Profile]:
        """Update profile"""
        db_profile = ProfileService.get_profile(db, user_id)
        if not db_profile:
            return None

        update_data = profile_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_profile, field, value)

        db.commit()
        db.refresh(db_profile)
        return db_profile

    @staticmethod
    def has_marketplace_history(db: Session, user_id: int) -> bool:
        """Whether other users' records point at this profile"""
        checks = (
            db.query(Project.id).filter(
                or_(Project.client_id == user_id, Project.selected_freelancer_id == user_id)
            ),
            db.query(Application.id).filter(Application.freelancer_id == user_id),
            db.query(Review.id).filter(or_(Review.reviewer_id == user_id, Review.reviewee_id == user_id)),
            db.query(TimeTracking.id).filter(TimeTracking.freelancer_id == user_id),
            db.query(DisputeResolution.id).filter(
                or_(DisputeResolution.initiated_by == user_id, DisputeResolution.resolved_by == user_id)
            ),
            db.query(FileAttachment.id).filter(FileAttachment.uploader_id == user_id),
        )
        return any(query.first() is not None for query in checks)

    @staticmethod
    def delete_profile(db: Session, user_id: int) -> bool:
        """Delete the profile and its personal rows, then deactivate the login.

        Profiles that projects, applications, reviews, time entries, disputes
        or files still refer to are refused with a ConflictError.
        """
        db_profile = ProfileService.get_profile(db, user_id)
        if not db_profile:
            return False

        if ProfileService.has_marketplace_history(db, user_id):
            raise ConflictError(
                "This profile has projects, applications or reviews and cannot be deleted. "
                "Contact support to close your account."
            )

        for model in (SavedProject, UserPreferences, Subscription):
            db.query(model).filter(model.user_id == user_id).delete(synchronize_session=False)
        for extension in (db_profile.freelancer_profile, db_profile.client_profile):
            if extension is not None:
                db.delete(extension)
        db.delete(db_profile)

        db_user = db.query(User).filter(User.id == user_id).first()
        if db_user:
            db_user.is_active = False

        db.commit()
        logger.info("Deleted profile %s", user_id)
        return True

    @staticmethod
    def get_freelancer_profile(db: Session, user_id: int) -> Optional[FreelancerProfile]:
        return db.query(FreelancerProfile).filter(FreelancerProfile.id == user_id).first()

    @staticmethod
    def update_freelancer_profile(
        db: Session, user_id: int, profile_update: FreelancerProfileUpdate
    ) -> Optional[FreelancerProfile]:
        db_profile = ProfileService.get_freelancer_profile(db, user_id)
        if not db_profile:
            return None

        update_data = profile_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_profile, field, value)

        db.commit()
        db.refresh(db_profile)
        return db_profile

    @staticmethod
    def get_client_profile(db: Session, user_id: int) -> Optional[ClientProfile]:
        return db.query(ClientProfile).filter(ClientProfile.id == user_id).first()

    @staticmethod
    def update_client_profile(
        db: Session, user_id: int, profile_update: ClientProfileUpdate
    ) -> Optional[ClientProfile]:
        db_profile = ProfileService.get_client_profile(db, user_id)
        if not db_profile:
            return None

        update_data = profile_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_profile, field, value)

        db.commit()
        db.refresh(db_profile)
        return db_profile
