from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from app.models.profile import SubscriptionTier, UserType


class ProfileSummary(BaseModel):
    id: int
    full_name: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ProfileBase(BaseModel):
    full_name: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None


class Profile(ProfileBase):
    id: int
    email: str
    user_type: UserType
    subscription_tier: SubscriptionTier = SubscriptionTier.FREE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FreelancerProfileUpdate(BaseModel):
    skills: Optional[List[str]] = None
    hourly_rate: Optional[float] = None
    experience_level: Optional[str] = None
    portfolio_url: Optional[str] = None
    availability_status: Optional[str] = None


class FreelancerProfile(BaseModel):
    id: int
    skills: Optional[List[str]] = None
    hourly_rate: Optional[float] = None
    experience_level: Optional[str] = None
    portfolio_url: Optional[str] = None
    availability_status: Optional[str] = None
    total_earnings: Optional[float] = None
    completed_projects: Optional[int] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ClientProfileUpdate(BaseModel):
    company_name: Optional[str] = None
    company_size: Optional[str] = None
    industry: Optional[str] = None


class ClientProfile(BaseModel):
    id: int
    company_name: Optional[str] = None
    company_size: Optional[str] = None
    industry: Optional[str] = None
    total_spent: Optional[float] = None
    active_projects: Optional[int] = None
    rating: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
