from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.preferences import Preferences, PreferencesUpdate
from app.services.preferences import PreferencesService

router = APIRouter()


@router.get("/me", response_model=Optional[Preferences])
async def read_my_preferences(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    return PreferencesService.get_preferences(db, current_profile.id)


@router.put("/me", response_model=Preferences)
async def update_my_preferences(
    preferences: PreferencesUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Create or update matching and notification preferences"""
    return PreferencesService.upsert_preferences(db, current_profile.id, preferences)
