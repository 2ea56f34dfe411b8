from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, Enum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from app.core.database import Base


class UserType(str, enum.Enum):
    FREELANCER = "freelancer"
    CLIENT = "client"


class SubscriptionTier(str, enum.Enum):
    FREE = "free"
    BASIC = "basic"
    BUSINESS = "business"
    ENTERPRISE = "enterprise"


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)
    user_type = Column(Enum(UserType), nullable=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String, nullable=False)
    avatar_url = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    website = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    subscription_tier = Column(Enum(SubscriptionTier), default=SubscriptionTier.FREE, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="profile")
    freelancer_profile = relationship("FreelancerProfile", uselist=False, back_populates="profile")
    client_profile = relationship("ClientProfile", uselist=False, back_populates="profile")


class FreelancerProfile(Base):
    __tablename__ = "freelancer_profiles"

    id = Column(Integer, ForeignKey("profiles.id"), primary_key=True, index=True)
    skills = Column(JSON, nullable=True)
    hourly_rate = Column(Float, nullable=True)
    experience_level = Column(String(50), nullable=True)
    portfolio_url = Column(String, nullable=True)
    availability_status = Column(String(50), nullable=True)
    total_earnings = Column(Float, default=0)
    completed_projects = Column(Integer, default=0)
    rating = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    profile = relationship("Profile", back_populates="freelancer_profile")


class ClientProfile(Base):
    __tablename__ = "client_profiles"

    id = Column(Integer, ForeignKey("profiles.id"), primary_key=True, index=True)
    company_name = Column(String(255), nullable=True)
    company_size = Column(String(50), nullable=True)
    industry = Column(String(255), nullable=True)
    total_spent = Column(Float, default=0)
    active_projects = Column(Integer, default=0)
    rating = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    profile = relationship("Profile", back_populates="client_profile")
