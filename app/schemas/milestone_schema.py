# app/schemas/milestone_schema.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

MILESTONE_CATEGORIES = {
    "motor": "Motor Skills",
    "cognitive": "Cognitive",
    "social": "Social & Emotional",
    "language": "Language",
    "other": "Other",
}
CATEGORY_PATTERN = "^(" + "|".join(MILESTONE_CATEGORIES) + ")$"


class MilestoneCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    date: date
    category: str = Field("motor", pattern=CATEGORY_PATTERN)
    description: Optional[str] = Field(None, max_length=2000)

    class Config:
        str_strip_whitespace = True


class MilestoneRead(BaseModel):
    id: int
    baby_id: int
    title: str
    date: date
    category: str
    description: Optional[str]

    class Config:
        from_attributes = True


class MilestoneCategory(BaseModel):
    id: str
    name: str
