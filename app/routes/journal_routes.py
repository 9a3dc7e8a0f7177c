from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.models.baby_model import BabyProfile
from app.models.journal_model import JournalEntry
from app.schemas.journal_schema import JournalEntryCreate, JournalEntryRead
from app.dependencies.baby import get_current_baby
from config.database import get_db

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("", response_model=List[JournalEntryRead])
def list_entries(
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    return (
        db.query(JournalEntry)
        .filter_by(baby_id=baby.id)
        .order_by(JournalEntry.date.desc(), JournalEntry.id.desc())
        .all()
    )


@router.post("", response_model=JournalEntryRead, status_code=201)
def create_entry(
    entry: JournalEntryCreate,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    new_entry = JournalEntry(baby_id=baby.id, **entry.model_dump())
    db.add(new_entry)
    db.commit()
    db.refresh(new_entry)
    return new_entry


@router.delete("/{entry_id}")
def delete_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    baby: BabyProfile = Depends(get_current_baby)
):
    entry = db.query(JournalEntry).filter_by(id=entry_id, baby_id=baby.id).first()

    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found.")

    db.delete(entry)
    db.commit()

    return {"msg": "Journal entry deleted."}
