import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.core.errors import ConflictError, ValidationFailed
from app.models.time_tracking import TimeTracking
from app.schemas.time_tracking import TimeTrackingStart
from app.services.analytics import calculate_earnings, format_currency, format_duration

logger = logging.getLogger(__name__)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes read back from the database as UTC"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def elapsed_seconds(entry: TimeTracking, now: Optional[datetime] = None) -> int:
    now = now or datetime.now(timezone.utc)
    end = as_utc(entry.end_time) if entry.end_time else now
    return max(int((end - as_utc(entry.start_time)).total_seconds()), 0)


class TimeTrackingService:
    @staticmethod
    def get_entry(db: Session, entry_id: int) -> Optional[TimeTracking]:
        return db.query(TimeTracking).filter(TimeTracking.id == entry_id).first()

    @staticmethod
    def get_active_entry(db: Session, project_id: int, freelancer_id: int) -> Optional[TimeTracking]:
        """Currently running entry for a freelancer on a project"""
        return (
            db.query(TimeTracking)
            .filter(
                TimeTracking.project_id == project_id,
                TimeTracking.freelancer_id == freelancer_id,
                TimeTracking.end_time.is_(None),
            )
            .first()
        )

    @staticmethod
    def get_project_entries(db: Session, project_id: int) -> List[TimeTracking]:
        """All entries of a project, most recent start first"""
        return (
            db.query(TimeTracking)
            .options(joinedload(TimeTracking.freelancer))
            .filter(TimeTracking.project_id == project_id)
            .order_by(TimeTracking.start_time.desc(), TimeTracking.id.desc())
            .all()
        )

    @staticmethod
    def start_timer(db: Session, timer_data: TimeTrackingStart, freelancer_id: int) -> TimeTracking:
        """Open a new entry; only one may run per project and freelancer"""
        description = timer_data.description.strip()
        if not description:
            raise ValidationFailed("Please enter a description for this time entry")

        if TimeTrackingService.get_active_entry(db, timer_data.project_id, freelancer_id):
            raise ConflictError("A timer is already running for this project")

        db_entry = TimeTracking(
            project_id=timer_data.project_id,
            freelancer_id=freelancer_id,
            description=description,
            start_time=datetime.now(timezone.utc),
            is_billable=timer_data.is_billable,
            hourly_rate=timer_data.hourly_rate,
        )
        db.add(db_entry)
        db.commit()
        db.refresh(db_entry)
        logger.info("Timer %s started by %s on project %s", db_entry.id, freelancer_id, timer_data.project_id)
        return db_entry

    @staticmethod
    def stop_timer(db: Session, entry_id: int) -> Optional[TimeTracking]:
        """Close a running entry and record its whole minutes"""
        db_entry = TimeTrackingService.get_entry(db, entry_id)
        if not db_entry:
            return None
        if db_entry.end_time is not None:
            raise ConflictError("This timer has already been stopped")

        end_time = datetime.now(timezone.utc)
        db_entry.end_time = end_time
        db_entry.duration_minutes = elapsed_seconds(db_entry, end_time) // 60

        db.commit()
        db.refresh(db_entry)
        logger.info("Timer %s stopped after %s minutes", entry_id, db_entry.duration_minutes)
        return db_entry

    @staticmethod
    def get_summary(
        db: Session,
        project_id: int,
        freelancer_id: int,
        hourly_rate: Optional[float] = None,
    ) -> dict:
        """Tracked minutes and earnings of a freelancer on a project"""
        entries = [
            entry for entry in TimeTrackingService.get_project_entries(db, project_id)
            if entry.freelancer_id == freelancer_id and entry.duration_minutes
        ]
        total_minutes = sum(entry.duration_minutes for entry in entries)
        earnings = calculate_earnings(total_minutes, hourly_rate)
        return {
            "total_entries": len(entries),
            "total_minutes": total_minutes,
            "total_duration_display": format_duration(total_minutes),
            "hourly_rate": hourly_rate,
            "total_earnings": earnings,
            "total_earnings_display": format_currency(earnings),
        }
