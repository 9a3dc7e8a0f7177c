from sqlalchemy import Column, Integer, String, Date, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from config.database import Base

class BabyProfile(Base):
    __tablename__ = "baby_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(6), nullable=False, default="other")
    weight_at_birth = Column(Float, nullable=True)  # kg
    height_at_birth = Column(Float, nullable=True)  # cm
    avatar_url = Column(String(500), nullable=True)

    # mirrored from the latest growth record
    current_weight = Column(Float, nullable=True)
    current_height = Column(Float, nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    parent = relationship("User", back_populates="baby")
    growth_records = relationship("GrowthRecord", back_populates="baby", cascade="all, delete")
    milestones = relationship("Milestone", back_populates="baby", cascade="all, delete")
    journal_entries = relationship("JournalEntry", back_populates="baby", cascade="all, delete")
    vaccinations = relationship("Vaccination", back_populates="baby", cascade="all, delete")
