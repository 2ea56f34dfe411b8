import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.models.preferences import UserPreferences
from app.models.profile import FreelancerProfile
from app.models.project import Project, ProjectStatus

logger = logging.getLogger(__name__)

SKILL_MATCH_SCORE = 0.8
NO_MATCH_SCORE = 0.3


def match_score(freelancer_skills: Iterable[str], required_skills: Optional[Iterable[str]]) -> float:
    """0.8 when any required skill is one of the freelancer's skills, else 0.3"""
    skills = set(freelancer_skills or ())
    if any(skill in skills for skill in (required_skills or ())):
        return SKILL_MATCH_SCORE
    return NO_MATCH_SCORE


def rank_projects(
    freelancer_skills: Sequence[str], projects: Sequence[Project]
) -> List[Tuple[Project, float]]:
    """Score projects and order them by score, keeping input order on ties"""
    scored = [(project, match_score(freelancer_skills, project.required_skills)) for project in projects]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


class MatchingService:
    @staticmethod
    def get_matched_projects(db: Session, user_id: int, limit: int = 10) -> List[Tuple[Project, float]]:
        """Open projects ranked against the freelancer's skills and preferences"""
        preferences = db.query(UserPreferences).filter(UserPreferences.user_id == user_id).first()
        freelancer = db.query(FreelancerProfile).filter(FreelancerProfile.id == user_id).first()

        query = db.query(Project).filter(Project.status == ProjectStatus.OPEN)

        if preferences and preferences.preferred_budget_range_min:
            query = query.filter(Project.budget_min >= preferences.preferred_budget_range_min)
        if preferences and preferences.preferred_budget_range_max:
            query = query.filter(Project.budget_max <= preferences.preferred_budget_range_max)

        projects = query.order_by(Project.created_at.desc(), Project.id.desc()).limit(limit).all()
        skills = (freelancer.skills if freelancer else None) or []

        logger.debug("Matching %d open projects against %d skills for user %s", len(projects), len(skills), user_id)
        return rank_projects(skills, projects)
