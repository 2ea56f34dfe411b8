from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.profile import ProfileSummary


class TimeTrackingStart(BaseModel):
    project_id: int
    description: str
    is_billable: bool = True
    hourly_rate: Optional[float] = None


class TimeTracking(BaseModel):
    id: int
    project_id: int
    freelancer_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None
    description: Optional[str] = None
    is_billable: bool
    hourly_rate: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TimeTrackingWithDetails(TimeTracking):
    freelancer: Optional[ProfileSummary] = None


class ActiveTimer(BaseModel):
    entry: TimeTracking
    elapsed_seconds: int
    elapsed_display: str


class TimeSummary(BaseModel):
    total_entries: int
    total_minutes: int
    total_duration_display: str
    hourly_rate: Optional[float] = None
    total_earnings: float
    total_earnings_display: str
