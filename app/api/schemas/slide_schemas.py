"""
Slide-related schemas for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain_core.entities.slide import SlideChanges
from app.domain_core.validators.slide_validators import MAX_SLIDE_ORDER
from app.domain_core.value_objects.field_update import from_payload


class SlideOut(BaseModel):
    """Slide data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int
    title: str
    body_text: Optional[str] = None
    image_url: Optional[str] = None
    slide_order: int
    created_at: datetime
    updated_at: datetime


class CreateSlideRequest(BaseModel):
    deck_id: int
    title: str = Field(..., min_length=1)
    body_text: Optional[str] = None
    image_url: Optional[str] = Field(None, description="URL or data URL")
    slide_order: int = Field(..., ge=0, le=MAX_SLIDE_ORDER)


class PatchSlideRequest(BaseModel):
    """
    Partial slide update request.

    A field missing from the body is left unchanged; a field sent as null is
    cleared. Only body_text and image_url may be cleared.
    """

    title: Optional[str] = Field(None, min_length=1)
    body_text: Optional[str] = None
    image_url: Optional[str] = None
    slide_order: Optional[int] = Field(None, ge=0, le=MAX_SLIDE_ORDER)

    def to_changes(self) -> SlideChanges:
        sent = self.model_dump(include=self.model_fields_set)
        return SlideChanges(
            title=from_payload(sent, "title"),
            body_text=from_payload(sent, "body_text"),
            image_url=from_payload(sent, "image_url"),
            slide_order=from_payload(sent, "slide_order"),
        )
