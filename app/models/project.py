from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from app.core.database import Base


class ProjectStatus(str, enum.Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    budget_min = Column(Float, nullable=True)
    budget_max = Column(Float, nullable=True)
    deadline = Column(DateTime(timezone=True), nullable=True)
    required_skills = Column(JSON, nullable=True)
    status = Column(Enum(ProjectStatus), default=ProjectStatus.OPEN, nullable=False)

    client_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    client = relationship("Profile", foreign_keys=[client_id])

    selected_freelancer_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    selected_freelancer = relationship("Profile", foreign_keys=[selected_freelancer_id])

    category_id = Column(Integer, ForeignKey("project_categories.id"), nullable=True)
    category = relationship("ProjectCategory")

    # Audit fields
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    applications = relationship("Application", back_populates="project", cascade="all, delete-orphan")
    milestones = relationship("ProjectMilestone", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="project", cascade="all, delete-orphan")
    time_entries = relationship("TimeTracking", cascade="all, delete-orphan")
    disputes = relationship("DisputeResolution", cascade="all, delete-orphan")
    attachments = relationship("FileAttachment", cascade="all, delete-orphan")
    saved_by = relationship("SavedProject", back_populates="project", cascade="all, delete-orphan")
