"""
SQLAlchemy model for Slide entity.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import relationship

from app.data.models.base import Base
from app.data.models.deck_model import _utcnow


class SlideModel(Base):
    __tablename__ = "slides"

    id = Column(Integer, primary_key=True, autoincrement=True)
    deck_id = Column(
        Integer,
        ForeignKey("slide_decks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    body_text = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    # Sort key only: duplicates and gaps are allowed
    slide_order = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    deck = relationship("DeckModel", back_populates="slides")

    __table_args__ = (Index("idx_slides_deck_order", "deck_id", "slide_order"),)

    def __repr__(self) -> str:
        return f"<SlideModel(id={self.id}, deck_id={self.deck_id}, order={self.slide_order})>"
