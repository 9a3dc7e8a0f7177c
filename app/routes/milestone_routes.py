from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.baby_model import BabyProfile
from app.models.milestone_model import Milestone
from app.schemas.milestone_schema import (
    CATEGORY_PATTERN,
    MILESTONE_CATEGORIES,
    MilestoneCategory,
    MilestoneCreate,
    MilestoneRead,
)
from app.dependencies.baby import get_current_baby
from config.database import get_db

router = APIRouter(prefix="/milestones", tags=["milestones"])


@router.get("/categories", response_model=List[MilestoneCategory])
def list_categories():
    return [{"id": key, "name": name} for key, name in MILESTONE_CATEGORIES.items()]


@router.get("", response_model=List[MilestoneRead])
def list_milestones(
    category: Optional[str] = Query(None, pattern=CATEGORY_PATTERN),
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    query = db.query(Milestone).filter_by(baby_id=baby.id)
    if category:
        query = query.filter(Milestone.category == category)
    return query.order_by(Milestone.date.desc(), Milestone.id.desc()).all()


@router.post("", response_model=MilestoneRead, status_code=201)
def create_milestone(
    milestone: MilestoneCreate,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    new_milestone = Milestone(baby_id=baby.id, **milestone.model_dump())
    db.add(new_milestone)
    db.commit()
    db.refresh(new_milestone)
    return new_milestone
