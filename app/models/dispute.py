from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from app.core.database import Base


class DisputeStatus(str, enum.Enum):
    OPEN = "open"
    IN_REVIEW = "in_review"
    RESOLVED = "resolved"
    CLOSED = "closed"


class DisputeResolution(Base):
    __tablename__ = "dispute_resolutions"

    id = Column(Integer, primary_key=True, index=True)
    dispute_type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    status = Column(Enum(DisputeStatus), default=DisputeStatus.OPEN, nullable=False)
    resolution_notes = Column(Text, nullable=True)
    resolved_at = Column(DateTime(timezone=True), nullable=True)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)

    initiated_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    initiated_by_user = relationship("Profile", foreign_keys=[initiated_by])

    resolved_by = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    resolved_by_user = relationship("Profile", foreign_keys=[resolved_by])

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
