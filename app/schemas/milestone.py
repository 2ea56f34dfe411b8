from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.milestone import MilestoneStatus


class MilestoneCreate(BaseModel):
    project_id: int
    title: str
    description: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[datetime] = None


class MilestoneStatusUpdate(BaseModel):
    status: MilestoneStatus


class Milestone(BaseModel):
    id: int
    project_id: int
    title: str
    description: Optional[str] = None
    amount: Optional[float] = None
    due_date: Optional[datetime] = None
    status: MilestoneStatus
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MilestoneSummary(BaseModel):
    total_milestones: int
    completed_milestones: int
    progress_percentage: float
    total_amount: float
    completed_amount: float
