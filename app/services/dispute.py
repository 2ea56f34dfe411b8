import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models.dispute import DisputeResolution, DisputeStatus
from app.schemas.dispute import DisputeCreate
from app.services.lifecycle import ensure_transition

logger = logging.getLogger(__name__)

FINAL_STATES = (DisputeStatus.RESOLVED, DisputeStatus.CLOSED)


class DisputeService:
    @staticmethod
    def get_dispute(db: Session, dispute_id: int) -> Optional[DisputeResolution]:
        return db.query(DisputeResolution).filter(DisputeResolution.id == dispute_id).first()

    @staticmethod
    def get_project_disputes(db: Session, project_id: int) -> List[DisputeResolution]:
        return (
            db.query(DisputeResolution)
            .options(
                joinedload(DisputeResolution.initiated_by_user),
                joinedload(DisputeResolution.resolved_by_user),
            )
            .filter(DisputeResolution.project_id == project_id)
            .order_by(DisputeResolution.created_at.desc(), DisputeResolution.id.desc())
            .all()
        )

    @staticmethod
    def create_dispute(db: Session, dispute: DisputeCreate, initiated_by: int) -> DisputeResolution:
        db_dispute = DisputeResolution(
            **dispute.model_dump(),
            initiated_by=initiated_by,
            status=DisputeStatus.OPEN,
        )
        db.add(db_dispute)
        db.commit()
        db.refresh(db_dispute)
        logger.info("Dispute %s opened on project %s by %s", db_dispute.id, dispute.project_id, initiated_by)
        return db_dispute

    @staticmethod
    def update_status(
        db: Session,
        dispute_id: int,
        status: DisputeStatus,
        actor_id: int,
        resolution_notes: Optional[str] = None,
    ) -> Optional[DisputeResolution]:
        db_dispute = DisputeService.get_dispute(db, dispute_id)
        if not db_dispute:
            return None

        ensure_transition(db_dispute.status, status)
        db_dispute.status = status
        if resolution_notes is not None:
            db_dispute.resolution_notes = resolution_notes
        if status in FINAL_STATES:
            db_dispute.resolved_by = actor_id
            db_dispute.resolved_at = datetime.now(timezone.utc)

        db.commit()
        db.refresh(db_dispute)
        logger.info("Dispute %s moved to %s by %s", dispute_id, status.value, actor_id)
        return db_dispute
