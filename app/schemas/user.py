from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, ConfigDict


class User(BaseModel):
    id: int
    email: EmailStr
    is_active: bool = True
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
