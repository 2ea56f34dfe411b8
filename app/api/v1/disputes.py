from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.projects import get_participating_project
from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.dispute import Dispute, DisputeCreate, DisputeStatusUpdate, DisputeWithDetails
from app.services.dispute import DisputeService

router = APIRouter()


@router.post("/", response_model=Dispute, status_code=status.HTTP_201_CREATED)
async def create_dispute(
    dispute: DisputeCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Open a dispute on a project you take part in"""
    get_participating_project(db, dispute.project_id, current_profile)
    return DisputeService.create_dispute(db, dispute, current_profile.id)


@router.get("/project/{project_id}", response_model=List[DisputeWithDetails])
async def read_project_disputes(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    get_participating_project(db, project_id, current_profile)
    return DisputeService.get_project_disputes(db, project_id)


@router.patch("/{dispute_id}/status", response_model=Dispute)
async def update_dispute_status(
    dispute_id: int,
    status_update: DisputeStatusUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Move a dispute through review to resolution"""
    dispute = DisputeService.get_dispute(db, dispute_id)
    if dispute is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Dispute not found"
        )
    get_participating_project(db, dispute.project_id, current_profile)
    return DisputeService.update_status(
        db, dispute_id, status_update.status, current_profile.id, status_update.resolution_notes
    )
