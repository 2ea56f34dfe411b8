import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, ValidationFailed
from app.models.application import Application
from app.models.profile import Profile
from app.models.project import Project, ProjectStatus
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.lifecycle import ensure_transition
from app.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)


class ProjectService:
    @staticmethod
    def get_project(db: Session, project_id: int) -> Optional[Project]:
        """Get project by ID"""
        return db.query(Project).filter(Project.id == project_id).first()

    @staticmethod
    def get_projects(
        db: Session,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[int] = None,
        status: Optional[ProjectStatus] = None
    ) -> List[Project]:
        """Get projects with optional filtering, newest first"""
        query = db.query(Project)

        if client_id:
            query = query.filter(Project.client_id == client_id)
        if status:
            query = query.filter(Project.status == status)

        return (
            query.order_by(Project.created_at.desc(), Project.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def create_project(db: Session, project: ProjectCreate, client: Profile) -> Project:
        """Post a new project, subject to the client's plan quota"""
        SubscriptionService.ensure_within_quota(db, client)

        db_project = Project(
            **project.model_dump(),
            client_id=client.id,
            status=ProjectStatus.OPEN,
        )
        db.add(db_project)
        db.commit()
        db.refresh(db_project)
        logger.info("Client %s posted project %s", client.id, db_project.id)
        return db_project

    @staticmethod
    def update_project(db: Session, project_id: int, project_update: ProjectUpdate) -> Optional[Project]:
        """Update project details"""
        db_project = ProjectService.get_project(db, project_id)
        if not db_project:
            return None

        update_data = project_update.model_dump(exclude_unset=True)
        budget_min = update_data.get("budget_min", db_project.budget_min)
        budget_max = update_data.get("budget_max", db_project.budget_max)
        if budget_min is not None and budget_max is not None and budget_min > budget_max:
            raise ValidationFailed("budget_min cannot exceed budget_max")

        for field, value in update_data.items():
            setattr(db_project, field, value)

        db.commit()
        db.refresh(db_project)
        return db_project

    @staticmethod
    def update_status(db: Session, project_id: int, status: ProjectStatus) -> Optional[Project]:
        """Move a project along its lifecycle"""
        db_project = ProjectService.get_project(db, project_id)
        if not db_project:
            return None

        ensure_transition(db_project.status, status)
        if status == ProjectStatus.IN_PROGRESS and db_project.selected_freelancer_id is None:
            raise ConflictError("A project starts when an application is accepted")

        db_project.status = status
        db.commit()
        db.refresh(db_project)
        logger.info("Project %s is now %s", project_id, status.value)
        return db_project

    @staticmethod
    def delete_project(db: Session, project_id: int) -> bool:
        """Delete project"""
        db_project = ProjectService.get_project(db, project_id)
        if not db_project:
            return False

        db.delete(db_project)
        db.commit()
        return True

    @staticmethod
    def is_project_owner(db: Session, project_id: int, user_id: int) -> bool:
        """Check if user is the client who posted the project"""
        project = ProjectService.get_project(db, project_id)
        return project is not None and project.client_id == user_id

    @staticmethod
    def is_participant(project: Project, user_id: int) -> bool:
        """Client or selected freelancer of the project"""
        return user_id in (project.client_id, project.selected_freelancer_id)

    @staticmethod
    def has_applied(db: Session, project_id: int, freelancer_id: int) -> bool:
        return db.query(Application).filter(
            Application.project_id == project_id,
            Application.freelancer_id == freelancer_id,
        ).first() is not None
