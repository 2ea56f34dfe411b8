from typing import Optional

from sqlalchemy.orm import Session

from app.models.preferences import UserPreferences
from app.schemas.preferences import PreferencesUpdate


class PreferencesService:
    @staticmethod
    def get_preferences(db: Session, user_id: int) -> Optional[UserPreferences]:
        return db.query(UserPreferences).filter(UserPreferences.user_id == user_id).first()

    @staticmethod
    def upsert_preferences(db: Session, user_id: int, preferences: PreferencesUpdate) -> UserPreferences:
        """Create the preferences row on first write, update it afterwards"""
        db_preferences = PreferencesService.get_preferences(db, user_id)
        if db_preferences is None:
            db_preferences = UserPreferences(user_id=user_id, notification_settings={})
            db.add(db_preferences)

        update_data = preferences.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_preferences, field, value)

        db.commit()
        db.refresh(db_preferences)
        return db_preferences
