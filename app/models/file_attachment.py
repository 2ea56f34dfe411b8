from sqlalchemy import Boolean, Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class FileAttachment(Base):
    __tablename__ = "file_attachments"

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String(255), nullable=False)
    file_size = Column(Integer, nullable=True)  # in bytes
    file_type = Column(String(255), nullable=True)
    file_path = Column(String, nullable=False)  # storage key
    file_url = Column(String, nullable=False)
    is_public = Column(Boolean, default=True, nullable=False)

    uploader_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    uploader = relationship("Profile")

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
