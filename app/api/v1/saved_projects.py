from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.saved_project import SavedProject, SavedProjectCreate
from app.services.project import ProjectService
from app.services.saved_project import SavedProjectService

router = APIRouter()


@router.get("/", response_model=List[SavedProject])
async def read_saved_projects(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    return SavedProjectService.get_saved_projects(db, current_profile.id)


@router.post("/", response_model=SavedProject, status_code=status.HTTP_201_CREATED)
async def save_project(
    saved: SavedProjectCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Bookmark a project"""
    if ProjectService.get_project(db, saved.project_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return SavedProjectService.save_project(db, current_profile.id, saved.project_id, saved.notes)


@router.delete("/{project_id}")
async def unsave_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    if not SavedProjectService.unsave_project(db, current_profile.id, project_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Saved project not found"
        )
    return {"message": "Project removed from saved list"}
