# app/schemas/dashboard_schema.py

from typing import List, Optional

from pydantic import BaseModel

from app.schemas.baby_schema import BabyResponse
from app.schemas.growth_schema import GrowthRecordRead
from app.schemas.journal_schema import JournalEntryRead
from app.schemas.milestone_schema import MilestoneRead
from app.schemas.vaccination_schema import VaccinationRead


class DashboardResponse(BaseModel):
    baby: Optional[BabyResponse] = None
    latest_growth: Optional[GrowthRecordRead] = None
    recent_milestones: List[MilestoneRead] = []
    upcoming_vaccinations: List[VaccinationRead] = []
    recent_journal_entries: List[JournalEntryRead] = []
