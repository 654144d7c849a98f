"""ORM models; importing this package registers every table on Base.metadata."""

from app.data.models.base import INTEGER_MAX, Base, fits_integer
from app.data.models.deck_model import DeckModel
from app.data.models.slide_model import SlideModel

__all__ = ["Base", "DeckModel", "SlideModel", "INTEGER_MAX", "fits_integer"]
