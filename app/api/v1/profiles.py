from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile, get_session_events, require_client, require_freelancer
from app.core.session import AuthEvent, SessionEvents
from app.models.profile import Profile as ProfileModel
from app.schemas.profile import (
    ClientProfile, ClientProfileUpdate, FreelancerProfile, FreelancerProfileUpdate, Profile, ProfileUpdate
)
from app.services.profile import ProfileService

router = APIRouter()


@router.get("/me", response_model=Profile)
async def read_my_profile(
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Get current user's profile"""
    return current_profile


@router.put("/me", response_model=Profile)
async def update_my_profile(
    profile_update: ProfileUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
    session_events: SessionEvents = Depends(get_session_events),
):
    """Update current user's profile"""
    profile = ProfileService.update_profile(db, current_profile.id, profile_update)
    session_events.emit(AuthEvent.USER_UPDATED, current_profile.id)
    return profile


@router.delete("/me")
async def delete_my_profile(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
    session_events: SessionEvents = Depends(get_session_events),
):
    """Delete current user's profile and sign them out"""
    user_id = current_profile.id
    ProfileService.delete_profile(db, user_id)
    session_events.emit(AuthEvent.SIGNED_OUT, user_id)
    return {"message": "Profile deleted successfully"}


@router.get("/me/freelancer", response_model=FreelancerProfile)
async def read_my_freelancer_profile(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    profile = ProfileService.get_freelancer_profile(db, current_profile.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Freelancer profile not found")
    return profile


@router.put("/me/freelancer", response_model=FreelancerProfile)
async def update_my_freelancer_profile(
    profile_update: FreelancerProfileUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    profile = ProfileService.update_freelancer_profile(db, current_profile.id, profile_update)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Freelancer profile not found")
    return profile


@router.get("/me/client", response_model=ClientProfile)
async def read_my_client_profile(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_client),
):
    profile = ProfileService.get_client_profile(db, current_profile.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client profile not found")
    return profile


@router.put("/me/client", response_model=ClientProfile)
async def update_my_client_profile(
    profile_update: ClientProfileUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_client),
):
    profile = ProfileService.update_client_profile(db, current_profile.id, profile_update)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client profile not found")
    return profile


@router.get("/{user_id}", response_model=Profile)
async def read_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Get any user's profile"""
    profile = ProfileService.get_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.get("/{user_id}/freelancer", response_model=FreelancerProfile)
async def read_freelancer_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    profile = ProfileService.get_freelancer_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Freelancer profile not found")
    return profile


@router.get("/{user_id}/client", response_model=ClientProfile)
async def read_client_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    profile = ProfileService.get_client_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client profile not found")
    return profile
