from typing import List

from sqlalchemy.orm import Session, joinedload

from app.core.errors import ConflictError
from app.models.project import Project
from app.models.saved_project import SavedProject


class SavedProjectService:
    @staticmethod
    def save_project(db: Session, user_id: int, project_id: int, notes: str = None) -> SavedProject:
        existing = db.query(SavedProject).filter(
            SavedProject.user_id == user_id,
            SavedProject.project_id == project_id,
        ).first()
        if existing:
            raise ConflictError("Project is already saved")

        db_saved = SavedProject(user_id=user_id, project_id=project_id, notes=notes)
        db.add(db_saved)
        db.commit()
        db.refresh(db_saved)
        return db_saved

    @staticmethod
    def unsave_project(db: Session, user_id: int, project_id: int) -> bool:
        deleted = db.query(SavedProject).filter(
            SavedProject.user_id == user_id,
            SavedProject.project_id == project_id,
        ).delete()
        db.commit()
        return deleted > 0

    @staticmethod
    def get_saved_projects(db: Session, user_id: int) -> List[SavedProject]:
        """Saved projects with their client, newest first"""
        return (
            db.query(SavedProject)
            .options(joinedload(SavedProject.project).joinedload(Project.client))
            .filter(SavedProject.user_id == user_id)
            .order_by(SavedProject.created_at.desc(), SavedProject.id.desc())
            .all()
        )
