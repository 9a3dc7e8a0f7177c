import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.models.baby_model import BabyProfile
from app.models.vaccination_model import Vaccination
from app.schemas.vaccination_schema import (
    AdministerRequest,
    VaccinationCreate,
    VaccinationRead,
    VaccinationSchedule,
)
from app.dependencies.baby import get_current_baby
from app.utils.vaccination_schedule import is_overdue, partition_vaccinations
from app.utils.vaccination_seeder import VaccinationSeedingError, ensure_standard_schedule
from config.database import get_db

router = APIRouter(prefix="/vaccinations", tags=["vaccinations"])

logger = logging.getLogger(__name__)


def to_vaccination_read(vaccination: Vaccination, today: date) -> VaccinationRead:
    response = VaccinationRead.model_validate(vaccination)
    response.overdue = is_overdue(vaccination, today)
    return response


@router.get("", response_model=VaccinationSchedule)
def get_schedule(
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    """
    Returns the schedule split into upcoming and completed doses. The first
    load for a baby with no vaccinations seeds the standard schedule.
    """
    try:
        vaccinations = ensure_standard_schedule(db, baby)
    except VaccinationSeedingError as e:
        raise HTTPException(status_code=500, detail=str(e))

    today = date.today()
    upcoming, completed = partition_vaccinations(vaccinations)

    return {
        "upcoming": [to_vaccination_read(v, today) for v in upcoming],
        "completed": [to_vaccination_read(v, today) for v in completed],
    }


@router.post("", response_model=VaccinationRead, status_code=201)
def create_vaccination(
    vaccination: VaccinationCreate,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    new_vaccination = Vaccination(
        baby_id=baby.id,
        name=vaccination.name,
        scheduled_date=vaccination.scheduled_date,
        notes=vaccination.notes,
        administered_date=None,
    )
    db.add(new_vaccination)
    db.commit()
    db.refresh(new_vaccination)
    return to_vaccination_read(new_vaccination, date.today())


@router.patch("/{vaccination_id}/administer", response_model=VaccinationRead)
def mark_administered(
    vaccination_id: int,
    data: Optional[AdministerRequest] = None,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    vaccination = db.query(Vaccination).filter_by(id=vaccination_id, baby_id=baby.id).first()
    if not vaccination:
        raise HTTPException(status_code=404, detail="Vaccination not found.")

    # one-way transition: upcoming -> completed
    if vaccination.administered_date is not None:
        raise HTTPException(status_code=409, detail="Vaccination already marked as administered.")

    today = date.today()
    administered_date = (data.administered_date if data else None) or today
    if administered_date > today:
        raise HTTPException(status_code=400, detail="administered_date cannot be in the future.")

    vaccination.administered_date = administered_date
    db.commit()
    db.refresh(vaccination)

    logger.info("Vaccination %s administered on %s", vaccination.id, administered_date)
    return to_vaccination_read(vaccination, today)
