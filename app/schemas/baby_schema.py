from pydantic import BaseModel, Field, field_validator
from datetime import date
from typing import Optional

GENDER_PATTERN = "^(male|female|other)$"


class BabyProfileSave(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    gender: str = Field("other", pattern=GENDER_PATTERN)
    weight_at_birth: Optional[float] = Field(None, gt=0)   # kg
    height_at_birth: Optional[float] = Field(None, gt=0)   # cm

    class Config:
        str_strip_whitespace = True

    @field_validator("date_of_birth")
    @classmethod
    def birth_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return value


class AgeResponse(BaseModel):
    unit: str
    value: Optional[int] = None
    years: Optional[int] = None
    months: Optional[int] = None


class BabyResponse(BaseModel):
    id: int
    name: str
    date_of_birth: date
    gender: str
    weight_at_birth: Optional[float]
    height_at_birth: Optional[float]
    avatar_url: Optional[str]
    current_weight: Optional[float]
    current_height: Optional[float]
    age: Optional[AgeResponse] = None
    age_label: Optional[str] = None

    class Config:
        from_attributes = True
