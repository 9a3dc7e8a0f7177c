# app/schemas/growth_schema.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class GrowthRecordCreate(BaseModel):
    date: date
    weight: Optional[float] = Field(None, gt=0)               # kg
    height: Optional[float] = Field(None, gt=0)               # cm
    head_circumference: Optional[float] = Field(None, gt=0)   # cm
    notes: Optional[str] = Field(None, max_length=1000)

    class Config:
        str_strip_whitespace = True


class GrowthRecordRead(BaseModel):
    id: int
    baby_id: int
    date: date
    weight: Optional[float]
    height: Optional[float]
    head_circumference: Optional[float]
    notes: Optional[str]

    class Config:
        from_attributes = True
