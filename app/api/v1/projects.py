from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile, require_client, require_freelancer
from app.models.profile import Profile as ProfileModel
from app.models.project import Project as ProjectModel, ProjectStatus
from app.schemas.project import MatchedProject, Project, ProjectCreate, ProjectStatusUpdate, ProjectUpdate
from app.services.matching import MatchingService
from app.services.project import ProjectService

router = APIRouter()


def get_owned_project(db: Session, project_id: int, profile: ProfileModel) -> ProjectModel:
    project = ProjectService.get_project(db, project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    if project.client_id != profile.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the project owner can do this"
        )
    return project


def get_participating_project(db: Session, project_id: int, profile: ProfileModel) -> ProjectModel:
    """Project the profile owns or was hired on"""
    project = ProjectService.get_project(db, project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    if not ProjectService.is_participant(project, profile.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not enough permissions"
        )
    return project


@router.get("/", response_model=List[Project])
async def read_projects(
    skip: int = 0,
    limit: int = 100,
    status: Optional[ProjectStatus] = None,
    client_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Browse projects, newest first"""
    return ProjectService.get_projects(db, skip=skip, limit=limit, client_id=client_id, status=status)


@router.get("/matches", response_model=List[MatchedProject])
async def read_matched_projects(
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_freelancer),
):
    """Open projects ranked by skill overlap with the current freelancer"""
    matches = MatchingService.get_matched_projects(db, current_profile.id, limit=limit)
    return [
        {**Project.model_validate(project).model_dump(), "match_score": score}
        for project, score in matches
    ]


@router.post("/", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    project: ProjectCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(require_client),
):
    """Post a new project"""
    return ProjectService.create_project(db, project, current_profile)


@router.get("/{project_id}", response_model=Project)
async def read_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Get project by ID"""
    project = ProjectService.get_project(db, project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return project


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: int,
    project_update: ProjectUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Update project details (owner only)"""
    get_owned_project(db, project_id, current_profile)
    return ProjectService.update_project(db, project_id, project_update)


@router.patch("/{project_id}/status", response_model=Project)
async def update_project_status(
    project_id: int,
    status_update: ProjectStatusUpdate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Complete or cancel a project (owner only)"""
    get_owned_project(db, project_id, current_profile)
    return ProjectService.update_status(db, project_id, status_update.status)


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Delete project (owner only)"""
    get_owned_project(db, project_id, current_profile)
    ProjectService.delete_project(db, project_id)
    return {"message": "Project deleted successfully"}
