from sqlalchemy import Column, Integer, Text, DateTime, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class TimeTracking(Base):
    """A timer entry; running while end_time is null"""

    __tablename__ = "time_tracking"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    is_billable = Column(Boolean, default=True, nullable=False)
    hourly_rate = Column(Float, nullable=True)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)

    freelancer_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    freelancer = relationship("Profile")

    # Audit fields
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
