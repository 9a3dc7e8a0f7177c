# app/utils/vaccination_schedule.py
from datetime import date, datetime
from typing import List, Tuple

from app.utils.age_calculator import add_months

# (name, months after birth, dose note), in display order
STANDARD_SCHEDULE = (
    ("Hepatitis B (HepB)", 0, "First dose at birth"),
    ("Hepatitis B (HepB)", 1, "Second dose"),
    ("DTaP", 2, "First dose"),
    ("IPV (Polio)", 2, "First dose"),
    ("Hib", 2, "First dose"),
    ("PCV13", 2, "First dose"),
    ("RV (Rotavirus)", 2, "First dose"),
    ("DTaP", 4, "Second dose"),
    ("IPV (Polio)", 4, "Second dose"),
    ("Hib", 4, "Second dose"),
    ("PCV13", 4, "Second dose"),
    ("RV (Rotavirus)", 4, "Second dose"),
)


def generate_standard_schedule(date_of_birth: date) -> List[dict]:
    """
    Materializes STANDARD_SCHEDULE against a date of birth. Pure: the same
    date of birth always yields the same list.
    """
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()

    return [
        {
            "name": name,
            "scheduled_date": add_months(date_of_birth, offset),
            "administered_date": None,
            "notes": note,
            "schedule_offset_months": offset,
        }
        for name, offset, note in STANDARD_SCHEDULE
    ]


def partition_vaccinations(records) -> Tuple[list, list]:
    """Splits records into (upcoming, completed), keeping their order."""
    upcoming, completed = [], []
    for record in records:
        if record.administered_date is None:
            upcoming.append(record)
        else:
            completed.append(record)
    return upcoming, completed


def is_overdue(record, today) -> bool:
    if isinstance(today, datetime):
        today = today.date()
    return record.administered_date is None and record.scheduled_date < today
