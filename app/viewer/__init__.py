"""Client-side view layer: API client, view state machine and slide navigator."""

from app.viewer.api_client import ApiError, DeckApiClient
from app.viewer.controller import InvalidTransitionError, ViewController, ViewState
from app.viewer.navigator import NavAction, SlideNavigator

__all__ = [
    "ApiError",
    "DeckApiClient",
    "InvalidTransitionError",
    "ViewController",
    "ViewState",
    "NavAction",
    "SlideNavigator",
]
