from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.profile import ProfileSummary
from app.schemas.project import Project


class SavedProjectCreate(BaseModel):
    project_id: int
    notes: Optional[str] = None


class SavedProjectDetail(Project):
    client: Optional[ProfileSummary] = None


class SavedProject(BaseModel):
    id: int
    user_id: int
    project_id: int
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    project: Optional[SavedProjectDetail] = None

    model_config = ConfigDict(from_attributes=True)
