import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models.application import Application, ApplicationStatus
from app.models.profile import Profile
from app.models.project import ProjectStatus
from app.schemas.application import ApplicationCreate, ApplicationUpdate
from app.services.lifecycle import ensure_transition
from app.services.project import ProjectService
from app.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)


class ApplicationService:
    @staticmethod
    def get_application(db: Session, application_id: int) -> Optional[Application]:
        """Get application by ID"""
        return db.query(Application).filter(Application.id == application_id).first()

    @staticmethod
    def get_applications(
        db: Session,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[int] = None,
        freelancer_id: Optional[int] = None,
    ) -> List[Application]:
        """Get applications with optional filtering, newest first"""
        query = db.query(Application)

        if project_id:
            query = query.filter(Application.project_id == project_id)
        if freelancer_id:
            query = query.filter(Application.freelancer_id == freelancer_id)

        return (
            query.order_by(Application.created_at.desc(), Application.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def create_application(db: Session, application: ApplicationCreate, freelancer: Profile) -> Optional[Application]:
        """Submit a proposal; returns None when the project does not exist"""
        project = ProjectService.get_project(db, application.project_id)
        if project is None:
            return None
        if project.status != ProjectStatus.OPEN:
            raise ConflictError("This project is no longer accepting applications")
        if ProjectService.has_applied(db, project.id, freelancer.id):
            raise ConflictError("You have already applied to this project")

        SubscriptionService.ensure_within_quota(db, freelancer)

        db_application = Application(
            **application.model_dump(),
            freelancer_id=freelancer.id,
            status=ApplicationStatus.PENDING,
        )
        db.add(db_application)
        db.commit()
        db.refresh(db_application)
        logger.info("Freelancer %s applied to project %s", freelancer.id, project.id)
        return db_application

    @staticmethod
    def update_application(
        db: Session, application_id: int, application_update: ApplicationUpdate
    ) -> Optional[Application]:
        """Edit a proposal while it is still pending"""
        db_application = ApplicationService.get_application(db, application_id)
        if not db_application:
            return None
        if db_application.status != ApplicationStatus.PENDING:
            raise ConflictError("Only pending applications can be edited")

        update_data = application_update.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_application, field, value)

        db.commit()
        db.refresh(db_application)
        return db_application

    @staticmethod
    def delete_application(db: Session, application_id: int) -> bool:
        """Withdraw a pending application"""
        db_application = ApplicationService.get_application(db, application_id)
        if not db_application:
            return False

        if db_application.status != ApplicationStatus.PENDING:
            raise ConflictError("Only pending applications can be withdrawn")

        db.delete(db_application)
        db.commit()
        return True

    @staticmethod
    def accept_application(db: Session, application_id: int) -> Optional[Application]:
        """Accept a proposal and start the project in a single transaction.

        The application and the project are written together; if either
        write fails nothing is committed.
        """
        db_application = ApplicationService.get_application(db, application_id)
        if not db_application:
            return None

        project = ProjectService.get_project(db, db_application.project_id)
        ensure_transition(db_application.status, ApplicationStatus.ACCEPTED)
        if project.selected_freelancer_id is not None:
            raise ConflictError("A freelancer has already been selected for this project")
        ensure_transition(project.status, ProjectStatus.IN_PROGRESS)

        try:
            db_application.status = ApplicationStatus.ACCEPTED
            project.selected_freelancer_id = db_application.freelancer_id
            project.status = ProjectStatus.IN_PROGRESS
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Accepting application %s failed, rolled back", application_id)
            raise

        db.refresh(db_application)
        logger.info(
            "Application %s accepted; project %s assigned to freelancer %s",
            application_id, project.id, db_application.freelancer_id,
        )
        return db_application

    @staticmethod
    def reject_application(db: Session, application_id: int) -> Optional[Application]:
        db_application = ApplicationService.get_application(db, application_id)
        if not db_application:
            return None

        ensure_transition(db_application.status, ApplicationStatus.REJECTED)
        db_application.status = ApplicationStatus.REJECTED
        db.commit()
        db.refresh(db_application)
        logger.info("Application %s rejected", application_id)
        return db_application
