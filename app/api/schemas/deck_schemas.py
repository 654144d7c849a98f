"""
Deck-related schemas for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .slide_schemas import SlideOut


class CreateDeckRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Deck name")


class UpdateDeckRequest(BaseModel):
    name: str = Field(..., min_length=1, description="New deck name")


class DeckOut(BaseModel):
    """Deck data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class DeckWithSlidesOut(DeckOut):
    """Deck plus its slides in playback order."""

    slides: List[SlideOut]
