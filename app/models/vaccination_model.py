# app/models/vaccination_model.py
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from config.database import Base

class Vaccination(Base):
    __tablename__ = "vaccinations"
    # Seeded rows carry their offset; manual rows keep it NULL and never collide.
    __table_args__ = (
        UniqueConstraint("baby_id", "name", "schedule_offset_months", name="uq_vaccination_seed"),
    )

    id = Column(Integer, primary_key=True, index=True)
    baby_id = Column(Integer, ForeignKey("baby_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    scheduled_date = Column(Date, nullable=False)
    administered_date = Column(Date, nullable=True)  # NULL = upcoming
    notes = Column(Text, nullable=True)
    schedule_offset_months = Column(Integer, nullable=True)

    baby = relationship("BabyProfile", back_populates="vaccinations")
