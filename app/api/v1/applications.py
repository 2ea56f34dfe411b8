from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile, require_freelancer
from app.models.application import Application as ApplicationModel
from app.models.profile import Profile as ProfileModel
from app.schemas.application import Application, ApplicationCreate, ApplicationUpdate
from app.services.application import ApplicationService
from app.services.project import ProjectService

router = APIRouter()


def get_application_or_404(db: Session, application_id: int) -> ApplicationModel:
    application = ApplicationService.get_application(db, application_id)
    if application is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found"
        )
    return application


def ensure_applicant(application: ApplicationModel, profile: ProfileModel) -> None:
    if application.freelancer_id != profile.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )


def ensure_project_owner(db: Session, application: ApplicationModel, profile: ProfileModel) -> None:
    if not ProjectService.is_project_owner(db, application.project_id, profile.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the project owner can review applications"
        )


@router.get("/", response_model=List[Application])
async def read_applications(
    skip: int = 0,
    limit: int = 100,
    project_id: Optional[int] = None,
    freelancer_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """List applications for one of your projects, or your own applications"""
    # Outside their own projects, users only see the applications they sent
    if not (project_id and ProjectService.is_project_owner(db, project_id, current_profile.id)):
        freelancer_id = current_profile.id

    return ApplicationService.get_applications(
        db, skip=skip, limit=limit, project_id=project_id, freelancer_id=freelancer_id
    )


@router.post("/", response_model=Application, status_code=status.HTTP_201_CREATED)
async def create_application(
    application: ApplicationCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    """Apply to an open project"""
    created = ApplicationService.create_application(db, application, current_profile)
    if created is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return created


@router.get("/{application_id}", response_model=Application)
async def read_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Get application by ID (applicant or project owner)"""
    application = get_application_or_404(db, application_id)
    if application.freelancer_id != current_profile.id:
        ensure_project_owner(db, application, current_profile)
    return application


@router.put("/{application_id}", response_model=Application)
async def update_application(
    application_id: int,
    application_update: ApplicationUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Edit a pending application (applicant only)"""
    application = get_application_or_404(db, application_id)
    ensure_applicant(application, current_profile)
    return ApplicationService.update_application(db, application_id, application_update)


@router.delete("/{application_id}")
async def delete_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Withdraw an application (applicant only)"""
    application = get_application_or_404(db, application_id)
    ensure_applicant(application, current_profile)
    ApplicationService.delete_application(db, application_id)
    return {"message": "Application deleted successfully"}


@router.post("/{application_id}/accept", response_model=Application)
async def accept_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Hire the applicant; the project moves to in_progress"""
    application = get_application_or_404(db, application_id)
    ensure_project_owner(db, application, current_profile)
    return ApplicationService.accept_application(db, application_id)


@router.post("/{application_id}/reject", response_model=Application)
async def reject_application(
    application_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Decline the applicant"""
    application = get_application_or_404(db, application_id)
    ensure_project_owner(db, application, current_profile)
    return ApplicationService.reject_application(db, application_id)
