from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from app.core.database import Base


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint('project_id', 'freelancer_id', name='unique_project_application'),
    )

    id = Column(Integer, primary_key=True, index=True)
    cover_letter = Column(Text, nullable=True)
    proposed_rate = Column(Float, nullable=True)
    estimated_duration = Column(String(100), nullable=True)
    status = Column(Enum(ApplicationStatus), default=ApplicationStatus.PENDING, nullable=False)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    project = relationship("Project", back_populates="applications")

    freelancer_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    freelancer = relationship("Profile")

    # Audit fields
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
