# app/utils/vaccination_seeder.py

import logging
import threading
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.baby_model import BabyProfile
from app.models.vaccination_model import Vaccination
from app.utils.vaccination_schedule import generate_standard_schedule

logger = logging.getLogger(__name__)

# single-flight guard: one seeding pass per baby at a time in this process.
# Babies share a fixed set of locks, picked by id.
SEED_LOCK_COUNT = 64
_seed_locks = tuple(threading.Lock() for _ in range(SEED_LOCK_COUNT))


class VaccinationSeedingError(Exception):
    pass


def _lock_for(baby_id: int) -> threading.Lock:
    return _seed_locks[baby_id % SEED_LOCK_COUNT]


def list_vaccinations(db: Session, baby_id: int) -> List[Vaccination]:
    return (
        db.query(Vaccination)
        .filter_by(baby_id=baby_id)
        .order_by(Vaccination.scheduled_date.asc(), Vaccination.id.asc())
        .all()
    )


def seed_standard_schedule(db: Session, baby: BabyProfile) -> int:
    """
    Inserts the standard schedule when the baby has no vaccination rows at all,
    standard or manual. Returns how many rows were inserted.
    """
    existing = db.query(Vaccination).filter_by(baby_id=baby.id).count()
    if existing:
        return 0

    candidates = generate_standard_schedule(baby.date_of_birth)
    try:
        db.add_all([Vaccination(baby_id=baby.id, **candidate) for candidate in candidates])
        db.commit()
    except IntegrityError:
        # another process seeded first; the unique constraint rejected our copy
        db.rollback()
        logger.warning("Standard schedule for baby %s was already seeded concurrently", baby.id)
        return 0
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Seeding the standard schedule failed for baby %s", baby.id)
        raise VaccinationSeedingError("Could not create the standard vaccination schedule.") from e

    logger.info("Seeded %d standard vaccinations for baby %s", len(candidates), baby.id)
    return len(candidates)


def ensure_standard_schedule(db: Session, baby: BabyProfile) -> List[Vaccination]:
    """Seeds on first load, then returns every vaccination ordered by scheduled date."""
    with _lock_for(baby.id):
        seed_standard_schedule(db, baby)
        return list_vaccinations(db, baby.id)
