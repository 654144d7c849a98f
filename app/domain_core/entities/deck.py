"""
Deck domain entity with core business rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from app.domain_core.entities.slide import Slide
from app.domain_core.entities.timestamps import next_timestamp, utcnow
from app.domain_core.validators.deck_validators import DeckValidators


@dataclass
class Deck:
    id: Optional[int]
    name: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(cls, name: str) -> "Deck":
        """Build an unsaved deck; created_at and updated_at start equal."""
        DeckValidators.validate_name(name)
        now = utcnow()
        return cls(id=None, name=name, created_at=now, updated_at=now)

    def rename(self, name: str) -> None:
        DeckValidators.validate_name(name)
        self.name = name
        self.touch()

    def touch(self) -> None:
        """Business rule: any change to the deck or its slides refreshes updated_at."""
        self.updated_at = next_timestamp(self.updated_at)


@dataclass
class DeckWithSlides:
    """Read-only composite used to hydrate the presentation view."""

    id: int
    name: str
    created_at: datetime
    updated_at: datetime
    slides: List[Slide] = field(default_factory=list)

    @classmethod
    def compose(cls, deck: Deck, slides: List[Slide]) -> "DeckWithSlides":
        # Stable sort keeps insertion order for equal slide_order values
        ordered = sorted(slides, key=lambda s: s.slide_order)
        return cls(
            id=deck.id,
            name=deck.name,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
            slides=ordered,
        )
