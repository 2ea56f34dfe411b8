from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.catalog import ProjectCategory, Skill
from app.services.catalog import CatalogService

router = APIRouter()


@router.get("/skills", response_model=List[Skill])
async def read_skills(category: Optional[str] = None, db: Session = Depends(get_db)):
    """Active skills, optionally within one category"""
    return CatalogService.get_skills(db, category)


@router.get("/skills/categories", response_model=List[str])
async def read_skill_categories(db: Session = Depends(get_db)):
    return CatalogService.get_skill_categories(db)


@router.get("/project-categories", response_model=List[ProjectCategory])
async def read_project_categories(db: Session = Depends(get_db)):
    return CatalogService.get_project_categories(db)
