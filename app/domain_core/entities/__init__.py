from app.domain_core.entities.slide import Slide, SlideChanges
from app.domain_core.entities.deck import Deck, DeckWithSlides

__all__ = ["Deck", "DeckWithSlides", "Slide", "SlideChanges"]
