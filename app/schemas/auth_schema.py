from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# Used for sign-up; the length rule only applies to new passwords
class AuthRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserRead(BaseModel):
    id: int
    email: EmailStr
    dark_mode: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PreferencesUpdate(BaseModel):
    dark_mode: bool


class PreferencesRead(BaseModel):
    dark_mode: bool

    class Config:
        from_attributes = True
