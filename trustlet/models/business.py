"""Business model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from trustlet.db.base import Base


class Business(Base):
    """A user's single review-collecting business profile."""

    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, index=True)
    owner_user_id = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    website = Column(Text)
    logo_url = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now)

    reviews = relationship("Review", back_populates="business", cascade="all, delete-orphan")
