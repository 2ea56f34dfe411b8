from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.review import Review, ReviewCreate, ReviewSummary, ReviewWithDetails
from app.services.project import ProjectService
from app.services.review import ReviewService

router = APIRouter()


@router.post("/", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(
    review: ReviewCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Review the other party of a project you took part in"""
    project = ProjectService.get_project(db, review.project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return ReviewService.create_review(db, review, current_profile, project)


@router.get("/user/{user_id}", response_model=List[ReviewWithDetails])
async def read_user_reviews(
    user_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Public reviews about a user, newest first"""
    return ReviewService.get_user_reviews(db, user_id)


@router.get("/user/{user_id}/summary", response_model=ReviewSummary)
async def read_user_review_summary(
    user_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Average rating and 5-to-1 star distribution"""
    return ReviewService.get_summary(db, user_id)
