# app/schemas/journal_schema.py

from datetime import date

from pydantic import BaseModel, Field

MOOD_PATTERN = "^(happy|excited|tired|sick|fussy|calm)$"


class JournalEntryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    date: date
    content: str = Field(..., min_length=1)
    mood: str = Field("happy", pattern=MOOD_PATTERN)

    class Config:
        str_strip_whitespace = True


class JournalEntryRead(BaseModel):
    id: int
    baby_id: int
    title: str
    date: date
    content: str
    mood: str

    class Config:
        from_attributes = True
