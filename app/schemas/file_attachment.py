from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.profile import ProfileSummary


class FileAttachment(BaseModel):
    id: int
    uploader_id: int
    project_id: Optional[int] = None
    file_name: str
    file_size: Optional[int] = None
    file_type: Optional[str] = None
    file_url: str
    is_public: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FileAttachmentWithDetails(FileAttachment):
    uploader: Optional[ProfileSummary] = None
