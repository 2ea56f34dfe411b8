from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.dispute import DisputeStatus
from app.schemas.profile import ProfileSummary


class DisputeCreate(BaseModel):
    project_id: int
    dispute_type: str
    description: str


class DisputeStatusUpdate(BaseModel):
    status: DisputeStatus
    resolution_notes: Optional[str] = None


class Dispute(BaseModel):
    id: int
    project_id: int
    initiated_by: int
    dispute_type: str
    description: str
    status: DisputeStatus
    resolution_notes: Optional[str] = None
    resolved_by: Optional[int] = None
    resolved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DisputeWithDetails(Dispute):
    initiated_by_user: Optional[ProfileSummary] = None
    resolved_by_user: Optional[ProfileSummary] = None
