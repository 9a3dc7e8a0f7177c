import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.models.auth_models import User
from app.utils.security import email_from_jwt
from config.database import get_db

logger = logging.getLogger(__name__)

# Bearer tokens are issued by POST /api/auth/login
bearer_token = OAuth2PasswordBearer(tokenUrl="api/auth/login")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(token: str = Depends(bearer_token), db: Session = Depends(get_db)) -> User:
    """Resolves the bearer token to the signed-in parent account."""
    email = email_from_jwt(token)
    if email is None:
        raise _unauthorized("Invalid or expired token")

    user = db.query(User).filter_by(email=email).first()
    if user is None:
        # token outlived its account
        logger.info("Token presented for unknown account %s", email)
        raise _unauthorized("Account no longer exists")
    return user
