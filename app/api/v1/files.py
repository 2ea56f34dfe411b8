from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from app.api.v1.projects import get_participating_project
from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.schemas.file_attachment import FileAttachment, FileAttachmentWithDetails
from app.services.file_attachment import FileAttachmentService
from app.services.storage import AttachmentStorageService, get_attachment_storage

router = APIRouter()


@router.post("/project/{project_id}", response_model=FileAttachment, status_code=status.HTTP_201_CREATED)
async def upload_project_file(
    project_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
    storage: AttachmentStorageService = Depends(get_attachment_storage),
):
    """Attach a file to a project you take part in"""
    get_participating_project(db, project_id, current_profile)

    content = await file.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty"
        )

    return await FileAttachmentService.upload(
        db,
        storage,
        project_id=project_id,
        uploader_id=current_profile.id,
        file_name=file.filename or "upload",
        content=content,
        content_type=file.content_type,
    )


@router.get("/project/{project_id}", response_model=List[FileAttachmentWithDetails])
async def read_project_files(
    project_id: int,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    get_participating_project(db, project_id, current_profile)
    return FileAttachmentService.get_project_files(db, project_id)
