from sqlalchemy import (
    Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint('project_id', 'reviewer_id', 'reviewee_id', name='unique_project_review'),
        CheckConstraint('rating >= 1 AND rating <= 5', name='review_rating_range'),
    )

    id = Column(Integer, primary_key=True, index=True)
    rating = Column(Integer, nullable=False)
    title = Column(String(255), nullable=True)
    comment = Column(Text, nullable=True)
    is_public = Column(Boolean, default=True, nullable=False)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    project = relationship("Project", back_populates="reviews")

    reviewer_id = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    reviewer = relationship("Profile", foreign_keys=[reviewer_id])

    reviewee_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    reviewee = relationship("Profile", foreign_keys=[reviewee_id])

    created_at = Column(DateTime(timezone=True), server_default=func.now())
