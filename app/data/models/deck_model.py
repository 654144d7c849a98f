"""
SQLAlchemy model for Deck entity.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.orm import relationship

from app.data.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeckModel(Base):
    __tablename__ = "slide_decks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=_utcnow, nullable=False, index=True
    )

    # Relationships
    slides = relationship(
        "SlideModel",
        back_populates="deck",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<DeckModel(id={self.id}, name='{self.name}')>"
