import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.baby_model import BabyProfile
from app.models.auth_models import User
from app.schemas.baby_schema import AgeResponse, BabyProfileSave, BabyResponse
from config.database import get_db
from config.settings import AVATAR_URL_PATH
from app.dependencies.auth import get_current_user
from app.dependencies.baby import find_baby, get_current_baby
from app.utils.age_calculator import compute_age, format_age
from app.utils.file_helper import save_avatar, remove_avatar

router = APIRouter(prefix="/babies", tags=["babies"])

logger = logging.getLogger(__name__)

AVATAR_URL_MARKER = f"{AVATAR_URL_PATH}/"


def build_baby_response(baby: BabyProfile, today: Optional[date] = None) -> BabyResponse:
    """Serializes the profile together with its age at 'today'."""
    response = BabyResponse.model_validate(baby)
    age = compute_age(baby.date_of_birth, today or date.today())
    response.age = AgeResponse(**age)
    response.age_label = format_age(age)
    return response


# GET: the logged-in user's profile, or null when none was saved yet
@router.get("/me", response_model=Optional[BabyResponse])
def get_my_baby(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    baby = find_baby(db, current_user)
    if not baby:
        return None
    return build_baby_response(baby)

# PUT: creates the profile on first save, updates it afterwards
@router.put("/me", response_model=BabyResponse)
def save_my_baby(
    baby_data: BabyProfileSave,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    baby = find_baby(db, current_user)

    if baby:
        for key, value in baby_data.model_dump().items():
            setattr(baby, key, value)
    else:
        baby = BabyProfile(user_id=current_user.id, **baby_data.model_dump())
        db.add(baby)

    db.commit()
    db.refresh(baby)

    logger.info("Saved baby profile %s for user %s", baby.id, current_user.id)
    return build_baby_response(baby)

# POST: uploads a new avatar and points the profile at it
@router.post("/me/avatar", response_model=BabyResponse)
def upload_avatar(
    request: Request,
    image: UploadFile = File(...),
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    old_avatar = baby.avatar_url
    filename = save_avatar(image)

    baby.avatar_url = f"{str(request.base_url).rstrip('/')}{AVATAR_URL_MARKER}{filename}"
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        remove_avatar(filename)
        raise
    db.refresh(baby)

    if old_avatar and AVATAR_URL_MARKER in old_avatar:
        remove_avatar(old_avatar.rsplit("/", 1)[-1])

    return build_baby_response(baby)
