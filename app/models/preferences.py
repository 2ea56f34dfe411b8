from sqlalchemy import Boolean, Column, Integer, String, DateTime, Float, ForeignKey, JSON
from sqlalchemy.sql import func

from app.core.database import Base


class UserPreferences(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, unique=True, index=True)
    preferred_project_types = Column(JSON, nullable=True)
    preferred_budget_range_min = Column(Float, nullable=True)
    preferred_budget_range_max = Column(Float, nullable=True)
    preferred_project_duration = Column(String(100), nullable=True)
    notification_settings = Column(JSON, default=dict, nullable=False)
    ai_matching_enabled = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
