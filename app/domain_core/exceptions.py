"""
Domain errors raised by use cases and mapped to HTTP responses by the API layer.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class DeckNotFoundError(DomainError):
    """Raised when an operation requires a deck that does not exist."""

    def __init__(self, deck_id: int):
        super().__init__(f"Slide deck with id {deck_id} not found", "DECK_NOT_FOUND")
        self.deck_id = deck_id


class SlideNotFoundError(DomainError):
    """Raised when an operation requires a slide that does not exist."""

    def __init__(self, slide_id: int):
        super().__init__(f"Slide with id {slide_id} not found", "SLIDE_NOT_FOUND")
        self.slide_id = slide_id


class ValidationError(DomainError):
    """Raised when input breaks a domain rule (empty text, negative order)."""

    def __init__(self, reason: str):
        super().__init__(reason, "VALIDATION_ERROR")
