from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class PreferencesUpdate(BaseModel):
    preferred_project_types: Optional[List[str]] = None
    preferred_budget_range_min: Optional[float] = None
    preferred_budget_range_max: Optional[float] = None
    preferred_project_duration: Optional[str] = None
    notification_settings: Optional[Dict[str, Any]] = None
    ai_matching_enabled: Optional[bool] = None


class Preferences(BaseModel):
    id: int
    user_id: int
    preferred_project_types: Optional[List[str]] = None
    preferred_budget_range_min: Optional[float] = None
    preferred_budget_range_max: Optional[float] = None
    preferred_project_duration: Optional[str] = None
    notification_settings: Dict[str, Any] = {}
    ai_matching_enabled: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
