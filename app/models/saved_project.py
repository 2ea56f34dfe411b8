from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class SavedProject(Base):
    __tablename__ = "saved_projects"
    __table_args__ = (
        UniqueConstraint('user_id', 'project_id', name='unique_saved_project'),
    )

    id = Column(Integer, primary_key=True, index=True)
    notes = Column(Text, nullable=True)

    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    project = relationship("Project", back_populates="saved_by")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
