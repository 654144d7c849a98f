"""
Slide navigation during playback.

Navigation is purely local: the navigator works on slides already fetched
and never talks to the API.
"""

from enum import Enum
from typing import Optional, Sequence

from app.api.schemas import DeckWithSlidesOut, SlideOut


class NavAction(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"
    EXIT = "exit"


KEY_BINDINGS = {
    "ArrowLeft": NavAction.PREVIOUS,
    "ArrowUp": NavAction.PREVIOUS,
    "ArrowRight": NavAction.NEXT,
    "ArrowDown": NavAction.NEXT,
    " ": NavAction.NEXT,
    "Escape": NavAction.EXIT,
}


def action_for_key(key: str) -> Optional[NavAction]:
    return KEY_BINDINGS.get(key)


def action_for_click(x: float, width: float) -> Optional[NavAction]:
    """Left third of the screen goes back, right third goes forward."""
    if width <= 0:
        return None
    if x < width / 3:
        return NavAction.PREVIOUS
    if x >= width * 2 / 3:
        return NavAction.NEXT
    return None


class SlideNavigator:
    def __init__(self, deck_name: str, slides: Sequence[SlideOut]):
        self.deck_name = deck_name
        self.slides = list(slides)
        self.index = 0

    @classmethod
    def for_presentation(cls, data: DeckWithSlidesOut) -> "SlideNavigator":
        return cls(data.name, data.slides)

    @property
    def is_empty(self) -> bool:
        return not self.slides

    @property
    def current(self) -> Optional[SlideOut]:
        if self.is_empty:
            return None
        return self.slides[self.index]

    def next(self) -> Optional[SlideOut]:
        if not self.is_empty:
            self.index = (self.index + 1) % len(self.slides)
        return self.current

    def previous(self) -> Optional[SlideOut]:
        if not self.is_empty:
            self.index = (self.index - 1) % len(self.slides)
        return self.current

    def available_actions(self) -> list[NavAction]:
        if self.is_empty:
            return [NavAction.EXIT]
        return [NavAction.PREVIOUS, NavAction.NEXT, NavAction.EXIT]

    def status_line(self) -> str:
        if self.is_empty:
            return f"{self.deck_name} • No slides to present"
        return f"{self.deck_name} • Slide {self.index + 1} of {len(self.slides)}"
