from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.models.baby_model import BabyProfile
from app.models.growth_model import GrowthRecord
from app.schemas.growth_schema import GrowthRecordCreate, GrowthRecordRead
from app.dependencies.baby import get_current_baby
from config.database import get_db

router = APIRouter(prefix="/growth", tags=["growth"])


def _latest_record(db: Session, baby_id: int):
    return (
        db.query(GrowthRecord)
        .filter_by(baby_id=baby_id)
        .order_by(GrowthRecord.date.desc(), GrowthRecord.id.desc())
        .first()
    )


@router.get("", response_model=List[GrowthRecordRead])
def list_growth_records(
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    return (
        db.query(GrowthRecord)
        .filter_by(baby_id=baby.id)
        .order_by(GrowthRecord.date.asc(), GrowthRecord.id.asc())
        .all()
    )


@router.post("", response_model=GrowthRecordRead, status_code=201)
def create_growth_record(
    record: GrowthRecordCreate,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    """
    Stores a measurement and re-mirrors current_weight/current_height on the
    profile from whichever record is now the latest by date.
    """
    new_record = GrowthRecord(baby_id=baby.id, **record.model_dump())
    db.add(new_record)
    db.flush()

    latest = _latest_record(db, baby.id)
    baby.current_weight = latest.weight
    baby.current_height = latest.height

    db.commit()
    db.refresh(new_record)
    return new_record
