from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies.auth import get_current_user
from app.models.auth_models import User
from app.schemas.auth_schema import PreferencesRead, PreferencesUpdate
from config.database import get_db

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesRead)
def get_preferences(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("", response_model=PreferencesRead)
def update_preferences(
    preferences: PreferencesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    current_user.dark_mode = preferences.dark_mode
    db.commit()
    db.refresh(current_user)
    return current_user
