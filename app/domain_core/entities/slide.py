"""
Slide domain entity with core business rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.domain_core.entities.timestamps import next_timestamp, utcnow
from app.domain_core.validators.slide_validators import SlideValidators
from app.domain_core.value_objects.field_update import (
    CLEAR,
    UNSET,
    FieldUpdate,
    resolve,
)

DEFAULT_SLIDE_TITLE = "First Slide"
DEFAULT_SLIDE_ORDER = 1


@dataclass
class SlideChanges:
    """Partial update for a slide. Every field defaults to UNSET."""

    title: FieldUpdate = UNSET
    body_text: FieldUpdate = UNSET
    image_url: FieldUpdate = UNSET
    slide_order: FieldUpdate = UNSET

    def changed_fields(self) -> list[str]:
        return [
            name
            for name in ("title", "body_text", "image_url", "slide_order")
            if getattr(self, name) is not UNSET
        ]


@dataclass
class Slide:
    id: Optional[int]
    deck_id: int
    title: str
    slide_order: int
    body_text: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(
        cls,
        deck_id: int,
        title: str,
        slide_order: int,
        body_text: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> "Slide":
        SlideValidators.validate_title(title)
        SlideValidators.validate_slide_order(slide_order)
        now = utcnow()
        return cls(
            id=None,
            deck_id=deck_id,
            title=title,
            slide_order=slide_order,
            # Empty strings are stored as null
            body_text=body_text or None,
            image_url=image_url or None,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def default_for(cls, deck_id: int) -> "Slide":
        """The slide every newly created deck starts with."""
        return cls.new(
            deck_id=deck_id, title=DEFAULT_SLIDE_TITLE, slide_order=DEFAULT_SLIDE_ORDER
        )

    def apply(self, changes: SlideChanges) -> None:
        """Apply a partial update; updated_at is refreshed even if nothing changed."""
        if changes.title is CLEAR:
            raise SlideValidators.cannot_clear("title")
        if changes.slide_order is CLEAR:
            raise SlideValidators.cannot_clear("slide_order")

        title = resolve(changes.title, self.title)
        slide_order = resolve(changes.slide_order, self.slide_order)
        SlideValidators.validate_title(title)
        SlideValidators.validate_slide_order(slide_order)

        self.title = title
        self.slide_order = slide_order
        self.body_text = resolve(changes.body_text, self.body_text)
        self.image_url = resolve(changes.image_url, self.image_url)
        self.updated_at = next_timestamp(self.updated_at)
