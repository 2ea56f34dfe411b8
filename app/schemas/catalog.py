from typing import Optional

from pydantic import BaseModel, ConfigDict


class Skill(BaseModel):
    id: int
    name: str
    category: str
    description: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class ProjectCategory(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)
