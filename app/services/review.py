import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from app.core.errors import ConflictError, PermissionDeniedError, ValidationFailed
from app.models.profile import Profile
from app.models.project import Project
from app.models.review import Review
from app.schemas.review import ReviewCreate
from app.services.analytics import average_rating, rating_distribution
from app.services.project import ProjectService

logger = logging.getLogger(__name__)


class ReviewService:
    @staticmethod
    def create_review(db: Session, review: ReviewCreate, reviewer: Profile, project: Project) -> Review:
        """Leave a review for the other side of a project"""
        if not ProjectService.is_participant(project, reviewer.id):
            raise PermissionDeniedError("Only project participants can leave reviews")
        if not ProjectService.is_participant(project, review.reviewee_id):
            raise ValidationFailed("The reviewed user did not take part in this project")
        if review.reviewee_id == reviewer.id:
            raise ValidationFailed("You cannot review yourself")

        existing = db.query(Review).filter(
            Review.project_id == review.project_id,
            Review.reviewer_id == reviewer.id,
            Review.reviewee_id == review.reviewee_id,
        ).first()
        if existing:
            raise ConflictError("You have already reviewed this user for this project")

        db_review = Review(**review.model_dump(), reviewer_id=reviewer.id)
        db.add(db_review)
        db.commit()
        db.refresh(db_review)
        logger.info("Review %s left by %s for %s", db_review.id, reviewer.id, review.reviewee_id)
        return db_review

    @staticmethod
    def get_user_reviews(db: Session, user_id: int) -> List[Review]:
        """Public reviews about a user, newest first"""
        return (
            db.query(Review)
            .options(joinedload(Review.reviewer), joinedload(Review.project))
            .filter(Review.reviewee_id == user_id, Review.is_public.is_(True))
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )

    @staticmethod
    def get_summary(db: Session, user_id: int) -> dict:
        ratings = [review.rating for review in ReviewService.get_user_reviews(db, user_id)]
        return {
            "total_reviews": len(ratings),
            "average_rating": round(average_rating(ratings), 1),
            "distribution": rating_distribution(ratings),
        }
