from app.data.repositories.deck_repository import DeckRepository
from app.data.repositories.slide_repository import SlideRepository

__all__ = ["DeckRepository", "SlideRepository"]
