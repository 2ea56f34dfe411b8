import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.milestone import MilestoneStatus, ProjectMilestone
from app.schemas.milestone import MilestoneCreate
from app.services.analytics import milestone_summary
from app.services.lifecycle import ensure_transition

logger = logging.getLogger(__name__)


class MilestoneService:
    @staticmethod
    def get_milestone(db: Session, milestone_id: int) -> Optional[ProjectMilestone]:
        return db.query(ProjectMilestone).filter(ProjectMilestone.id == milestone_id).first()

    @staticmethod
    def get_project_milestones(db: Session, project_id: int) -> List[ProjectMilestone]:
        """Milestones of a project in creation order"""
        return (
            db.query(ProjectMilestone)
            .filter(ProjectMilestone.project_id == project_id)
            .order_by(ProjectMilestone.created_at, ProjectMilestone.id)
            .all()
        )

    @staticmethod
    def create_milestone(db: Session, milestone: MilestoneCreate) -> ProjectMilestone:
        db_milestone = ProjectMilestone(**milestone.model_dump(), status=MilestoneStatus.PENDING)
        db.add(db_milestone)
        db.commit()
        db.refresh(db_milestone)
        return db_milestone

    @staticmethod
    def update_status(db: Session, milestone_id: int, status: MilestoneStatus) -> Optional[ProjectMilestone]:
        """Advance a milestone; completion stamps completed_at"""
        db_milestone = MilestoneService.get_milestone(db, milestone_id)
        if not db_milestone:
            return None

        ensure_transition(db_milestone.status, status)
        db_milestone.status = status
        if status == MilestoneStatus.COMPLETED:
            db_milestone.completed_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_milestone)
        logger.info("Milestone %s marked as %s", milestone_id, status.value)
        return db_milestone

    @staticmethod
    def get_summary(db: Session, project_id: int) -> dict:
        return milestone_summary(MilestoneService.get_project_milestones(db, project_id))
