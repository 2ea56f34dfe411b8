from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from app.models.project import ProjectStatus


class ProjectBase(BaseModel):
    title: str
    description: str
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    deadline: Optional[datetime] = None
    required_skills: Optional[List[str]] = None
    category_id: Optional[int] = None


class ProjectCreate(ProjectBase):
    @model_validator(mode="after")
    def check_budget_range(self):
        if self.budget_min is not None and self.budget_max is not None and self.budget_min > self.budget_max:
            raise ValueError("budget_min cannot exceed budget_max")
        return self


class ProjectUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    deadline: Optional[datetime] = None
    required_skills: Optional[List[str]] = None
    category_id: Optional[int] = None


class ProjectStatusUpdate(BaseModel):
    status: ProjectStatus


class Project(ProjectBase):
    id: int
    client_id: int
    status: ProjectStatus
    selected_freelancer_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MatchedProject(Project):
    match_score: float
