from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.profile import ProfileSummary


class ReviewCreate(BaseModel):
    project_id: int
    reviewee_id: int
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = None
    comment: Optional[str] = None
    is_public: bool = True


class ReviewProject(BaseModel):
    id: int
    title: str

    model_config = ConfigDict(from_attributes=True)


class Review(BaseModel):
    id: int
    project_id: int
    reviewer_id: int
    reviewee_id: int
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    is_public: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ReviewWithDetails(Review):
    reviewer: Optional[ProfileSummary] = None
    project: Optional[ReviewProject] = None


class RatingBucket(BaseModel):
    rating: int
    count: int
    percentage: float


class ReviewSummary(BaseModel):
    total_reviews: int
    average_rating: float
    distribution: List[RatingBucket]
