from sqlalchemy import Column, Integer, String, DateTime, Boolean, func
from config.database import Base
from sqlalchemy.orm import relationship


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    dark_mode = Column(Boolean, default=False, nullable=False)  # UI preference
    created_at = Column(DateTime, server_default=func.now())

    # one profile per user
    baby = relationship("BabyProfile", back_populates="parent", uselist=False)
