from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.catalog import ProjectCategory, Skill


class CatalogService:
    @staticmethod
    def get_skills(db: Session, category: Optional[str] = None) -> List[Skill]:
        """Active skills, optionally within one category, by name"""
        query = db.query(Skill).filter(Skill.is_active.is_(True))
        if category:
            query = query.filter(Skill.category == category)
        return query.order_by(Skill.name).all()

    @staticmethod
    def get_skill_categories(db: Session) -> List[str]:
        rows = (
            db.query(Skill.category)
            .filter(Skill.is_active.is_(True))
            .distinct()
            .order_by(Skill.category)
            .all()
        )
        return [row[0] for row in rows]

    @staticmethod
    def get_project_categories(db: Session) -> List[ProjectCategory]:
        return (
            db.query(ProjectCategory)
            .filter(ProjectCategory.is_active.is_(True))
            .order_by(ProjectCategory.name)
            .all()
        )
