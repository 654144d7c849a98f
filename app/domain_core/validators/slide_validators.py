"""
Domain validators for slide-related business rules.
"""

from app.domain_core.exceptions import ValidationError

# Largest value a SQLite INTEGER column holds
MAX_SLIDE_ORDER = 2**63 - 1


class SlideValidators:
    @staticmethod
    def validate_title(title: str) -> None:
        """Slide title is required and may not be blank."""
        if not isinstance(title, str) or not title:
            raise ValidationError("Slide title is required")

    @staticmethod
    def validate_slide_order(order: int) -> None:
        """slide_order is a non-negative integer sort key."""
        if isinstance(order, bool) or not isinstance(order, int):
            raise ValidationError("Slide order must be an integer")
        if order < 0:
            raise ValidationError("Slide order must be non-negative")
        if order > MAX_SLIDE_ORDER:
            raise ValidationError(f"Slide order must not exceed {MAX_SLIDE_ORDER}")

    @staticmethod
    def cannot_clear(field_name: str) -> ValidationError:
        return ValidationError(f"Slide {field_name} cannot be cleared")
