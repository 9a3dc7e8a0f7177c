from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.dependencies.auth import get_current_user
from app.models.auth_models import User
from app.models.baby_model import BabyProfile
from config.database import get_db


def find_baby(db: Session, user: User) -> Optional[BabyProfile]:
    # at most one profile per user
    return db.query(BabyProfile).filter_by(user_id=user.id).first()


def get_current_baby(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BabyProfile:
    baby = find_baby(db, current_user)
    if not baby:
        raise HTTPException(status_code=404, detail="Baby profile not found. Create one first.")
    return baby
