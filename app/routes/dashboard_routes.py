from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.models.auth_models import User
from app.models.growth_model import GrowthRecord
from app.models.journal_model import JournalEntry
from app.models.milestone_model import Milestone
from app.models.vaccination_model import Vaccination
from app.schemas.dashboard_schema import DashboardResponse
from app.schemas.growth_schema import GrowthRecordRead
from app.schemas.journal_schema import JournalEntryRead
from app.schemas.milestone_schema import MilestoneRead
from app.dependencies.auth import get_current_user
from app.dependencies.baby import find_baby
from app.routes.baby_routes import build_baby_response
from app.routes.vaccination_routes import to_vaccination_read
from config.database import get_db

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RECENT_LIMIT = 3


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Summary for the home screen:
    - profile with its age
    - latest growth measurement
    - 3 most recent milestones and journal entries
    - next 3 vaccinations not yet administered and not yet due
    """
    baby = find_baby(db, current_user)
    if not baby:
        # no profile yet: the client shows the "create a profile" prompt
        return DashboardResponse()

    today = date.today()

    latest_growth = (
        db.query(GrowthRecord)
        .filter_by(baby_id=baby.id)
        .order_by(GrowthRecord.date.desc(), GrowthRecord.id.desc())
        .first()
    )

    recent_milestones = (
        db.query(Milestone)
        .filter_by(baby_id=baby.id)
        .order_by(Milestone.date.desc(), Milestone.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    upcoming_vaccinations = (
        db.query(Vaccination)
        .filter(
            Vaccination.baby_id == baby.id,
            Vaccination.administered_date.is_(None),
            Vaccination.scheduled_date >= today,
        )
        .order_by(Vaccination.scheduled_date.asc(), Vaccination.id.asc())
        .limit(RECENT_LIMIT)
        .all()
    )

    recent_entries = (
        db.query(JournalEntry)
        .filter_by(baby_id=baby.id)
        .order_by(JournalEntry.date.desc(), JournalEntry.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    return DashboardResponse(
        baby=build_baby_response(baby, today),
        latest_growth=GrowthRecordRead.model_validate(latest_growth) if latest_growth else None,
        recent_milestones=[MilestoneRead.model_validate(m) for m in recent_milestones],
        upcoming_vaccinations=[to_vaccination_read(v, today) for v in upcoming_vaccinations],
        recent_journal_entries=[JournalEntryRead.model_validate(e) for e in recent_entries],
    )
