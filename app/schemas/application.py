from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.application import ApplicationStatus


class ApplicationCreate(BaseModel):
    project_id: int
    cover_letter: Optional[str] = None
    proposed_rate: Optional[float] = None
    estimated_duration: Optional[str] = None


class ApplicationUpdate(BaseModel):
    cover_letter: Optional[str] = None
    proposed_rate: Optional[float] = None
    estimated_duration: Optional[str] = None


class Application(BaseModel):
    id: int
    project_id: int
    freelancer_id: int
    cover_letter: Optional[str] = None
    proposed_rate: Optional[float] = None
    estimated_duration: Optional[str] = None
    status: ApplicationStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
