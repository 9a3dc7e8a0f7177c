# app/api/endpoints/auth_credentials.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from config.database import get_db
from app.models.auth_models import User
from app.schemas.auth_schema import AuthRequest, LoginRequest, UserRead
from app.dependencies.auth import get_current_user
from app.utils.security import hash_password, verify_password, jwt_for_user

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(data: AuthRequest, db: Session = Depends(get_db)):
    # 1) Refuse e-mails that are already registered
    existing_user = db.query(User).filter_by(email=data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="E-mail already registered."
        )

    # 2) Create the local user
    user = User(
        email=data.email,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("New user %s signed up", user.id)

    return {
        "msg": "User created successfully.",
        "user_id": user.id,
        "email": user.email
    }

@router.post("/login")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter_by(email=data.email).first()
    if not user or not verify_password(data.password, user.password_hash):
        logger.info("Failed login attempt for %s", data.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = jwt_for_user(email=user.email)

    return {
        "access_token": token,
        "token_type": "bearer",
        "user_id": user.id,
        "dark_mode": user.dark_mode,
    }


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
