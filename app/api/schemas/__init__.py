"""
API schemas package.
"""

from .base import ErrorResponse, HealthResponse, SuccessResponse
from .slide_schemas import CreateSlideRequest, PatchSlideRequest, SlideOut
from .deck_schemas import (
    CreateDeckRequest,
    DeckOut,
    DeckWithSlidesOut,
    UpdateDeckRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SuccessResponse",
    "CreateSlideRequest",
    "PatchSlideRequest",
    "SlideOut",
    "CreateDeckRequest",
    "DeckOut",
    "DeckWithSlidesOut",
    "UpdateDeckRequest",
]
