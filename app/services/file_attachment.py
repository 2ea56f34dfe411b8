import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models.file_attachment import FileAttachment
from app.services.storage import AttachmentStorageService

logger = logging.getLogger(__name__)


class FileAttachmentService:
    @staticmethod
    async def upload(
        db: Session,
        storage: AttachmentStorageService,
        project_id: int,
        uploader_id: int,
        file_name: str,
        content: bytes,
        content_type: str = None,
    ) -> FileAttachment:
        """Store the file, then record its metadata and public URL"""
        file_path, file_url = await storage.save_attachment(content, project_id, file_name, content_type)

        db_attachment = FileAttachment(
            uploader_id=uploader_id,
            project_id=project_id,
            file_name=file_name,
            file_size=len(content),
            file_type=content_type,
            file_path=file_path,
            file_url=file_url,
        )
        db.add(db_attachment)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            # Don't leave an orphaned object behind
            await storage.delete_attachment(file_path)
            raise

        db.refresh(db_attachment)
        logger.info("Stored %s (%d bytes) for project %s", file_path, len(content), project_id)
        return db_attachment

    @staticmethod
    def get_project_files(db: Session, project_id: int) -> List[FileAttachment]:
        return (
            db.query(FileAttachment)
            .options(joinedload(FileAttachment.uploader))
            .filter(FileAttachment.project_id == project_id)
            .order_by(FileAttachment.created_at.desc(), FileAttachment.id.desc())
            .all()
        )
