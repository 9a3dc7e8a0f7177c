# app/schemas/vaccination_schema.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class VaccinationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    scheduled_date: date
    notes: Optional[str] = Field(None, max_length=1000)

    class Config:
        str_strip_whitespace = True


class AdministerRequest(BaseModel):
    administered_date: Optional[date] = None  # defaults to today


class VaccinationRead(BaseModel):
    id: int
    baby_id: int
    name: str
    scheduled_date: date
    administered_date: Optional[date]
    notes: Optional[str]
    overdue: bool = False

    class Config:
        from_attributes = True


class VaccinationSchedule(BaseModel):
    upcoming: List[VaccinationRead]
    completed: List[VaccinationRead]
