"""
Domain validators for deck-related business rules.
"""

from app.domain_core.exceptions import ValidationError


class DeckValidators:
    @staticmethod
    def validate_name(name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValidationError("Deck name is required")
