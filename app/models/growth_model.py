# app/models/growth_model.py
from sqlalchemy import Column, Integer, Date, Float, Text, ForeignKey
from sqlalchemy.orm import relationship
from config.database import Base

class GrowthRecord(Base):
    __tablename__ = "growth_records"

    id = Column(Integer, primary_key=True, index=True)
    baby_id = Column(Integer, ForeignKey("baby_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    weight = Column(Float, nullable=True)              # kg
    height = Column(Float, nullable=True)              # cm
    head_circumference = Column(Float, nullable=True)  # cm
    notes = Column(Text, nullable=True)

    baby = relationship("BabyProfile", back_populates="growth_records")
