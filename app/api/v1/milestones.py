from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.projects import get_owned_project, get_participating_project
from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.milestone import Milestone, MilestoneCreate, MilestoneStatusUpdate, MilestoneSummary
from app.services.milestone import MilestoneService

router = APIRouter()


@router.get("/project/{project_id}", response_model=List[Milestone])
async def read_project_milestones(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Milestones of a project in creation order"""
    get_participating_project(db, project_id, current_profile)
    return MilestoneService.get_project_milestones(db, project_id)


@router.get("/project/{project_id}/summary", response_model=MilestoneSummary)
async def read_milestone_summary(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Progress percentage and paid/total amounts"""
    get_participating_project(db, project_id, current_profile)
    return MilestoneService.get_summary(db, project_id)


@router.post("/", response_model=Milestone, status_code=status.HTTP_201_CREATED)
async def create_milestone(
    milestone: MilestoneCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Add a milestone (project owner only)"""
    get_owned_project(db, milestone.project_id, current_profile)
    return MilestoneService.create_milestone(db, milestone)


@router.patch("/{milestone_id}/status", response_model=Milestone)
async def update_milestone_status(
    milestone_id: int,
    status_update: MilestoneStatusUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Move a milestone forward (project owner only)"""
    milestone = MilestoneService.get_milestone(db, milestone_id)
    if milestone is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Milestone not found"
        )
    get_owned_project(db, milestone.project_id, current_profile)
    return MilestoneService.update_status(db, milestone_id, status_update.status)
