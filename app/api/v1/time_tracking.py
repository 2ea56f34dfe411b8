from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.projects import get_participating_project
from app.core.database import get_db
from app.core.deps import get_current_profile, require_freelancer
from app.models.profile import Profile as ProfileModel
from app.schemas.time_tracking import (
    ActiveTimer, TimeSummary, TimeTracking, TimeTrackingStart, TimeTrackingWithDetails
)
from app.services.analytics import format_elapsed
from app.services.profile import ProfileService
from app.services.time_tracking import TimeTrackingService, elapsed_seconds

router = APIRouter()


@router.post("/start", response_model=TimeTracking, status_code=status.HTTP_201_CREATED)
async def start_timer(
    timer_data: TimeTrackingStart,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    """Start a timer on a project you were hired on"""
    project = get_participating_project(db, timer_data.project_id, current_profile)
    if project.selected_freelancer_id != current_profile.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the hired freelancer can track time"
        )
    return TimeTrackingService.start_timer(db, timer_data, current_profile.id)


@router.post("/{entry_id}/stop", response_model=TimeTracking)
async def stop_timer(
    entry_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    """Stop a running timer"""
    entry = TimeTrackingService.get_entry(db, entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Time entry not found"
        )
    if entry.freelancer_id != current_profile.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return TimeTrackingService.stop_timer(db, entry_id)


@router.get("/project/{project_id}", response_model=List[TimeTrackingWithDetails])
async def read_project_time_entries(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Time entries of a project, latest first"""
    get_participating_project(db, project_id, current_profile)
    return TimeTrackingService.get_project_entries(db, project_id)


@router.get("/project/{project_id}/active", response_model=Optional[ActiveTimer])
async def read_active_timer(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    """Running timer of the current freelancer with its elapsed time"""
    entry = TimeTrackingService.get_active_entry(db, project_id, current_profile.id)
    if entry is None:
        return None
    seconds = elapsed_seconds(entry)
    return {"entry": entry, "elapsed_seconds": seconds, "elapsed_display": format_elapsed(seconds)}


@router.get("/project/{project_id}/summary", response_model=TimeSummary)
async def read_time_summary(
    project_id: int,
    freelancer_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Tracked time and earnings at the freelancer's hourly rate"""
    project = get_participating_project(db, project_id, current_profile)
    freelancer_id = freelancer_id or project.selected_freelancer_id or current_profile.id

    freelancer = ProfileService.get_freelancer_profile(db, freelancer_id)
    hourly_rate = freelancer.hourly_rate if freelancer else None
    return TimeTrackingService.get_summary(db, project_id, freelancer_id, hourly_rate)
