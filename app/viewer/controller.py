"""
View state machine for the deck editor client.

States: list -> deck-editor -> slide-editor, and any state -> presentation
-> deck-editor. A failed API call aborts the transition and leaves the
current state untouched.
"""

from enum import Enum
from typing import List, Optional

from app.api.schemas import DeckOut, SlideOut
from app.domain_core.entities.slide import SlideChanges
from app.infra.config.logging_config import get_logger
from app.viewer.api_client import ApiError, DeckApiClient
from app.viewer.navigator import (
    NavAction,
    SlideNavigator,
    action_for_click,
    action_for_key,
)


class ViewState(str, Enum):
    LIST = "list"
    DECK_EDITOR = "deck-editor"
    SLIDE_EDITOR = "slide-editor"
    PRESENTATION = "presentation"


class InvalidTransitionError(Exception):
    def __init__(self, current: ViewState, action: str):
        super().__init__(f"Cannot {action} from view '{current.value}'")
        self.current = current
        self.action = action


class ViewController:
    def __init__(self, api: DeckApiClient):
        self.api = api
        self.state = ViewState.LIST
        self.decks: List[DeckOut] = []
        self.selected_deck: Optional[DeckOut] = None
        self.slides: List[SlideOut] = []
        self.selected_slide: Optional[SlideOut] = None
        self.navigator: Optional[SlideNavigator] = None
        self._log = get_logger("viewer.controller")

    def _require(self, *states: ViewState, action: str) -> None:
        if self.state not in states:
            raise InvalidTransitionError(self.state, action)

    # list view

    async def refresh_decks(self) -> List[DeckOut]:
        try:
            self.decks = await self.api.list_decks()
        except ApiError:
            self._log.exception("viewer.refresh_decks_failed")
            raise
        return self.decks

    async def create_deck(self, name: str) -> DeckOut:
        self._require(ViewState.LIST, action="create a deck")
        try:
            deck = await self.api.create_deck(name)
        except ApiError:
            self._log.exception("viewer.create_deck_failed")
            raise
        self.decks.insert(0, deck)
        return deck

    async def delete_deck(self, deck_id: int) -> None:
        self._require(ViewState.LIST, action="delete a deck")
        try:
            await self.api.delete_deck(deck_id)
        except ApiError:
            self._log.exception("viewer.delete_deck_failed", deck_id=deck_id)
            raise
        self.decks = [d for d in self.decks if d.id != deck_id]

    async def open_deck(self, deck: DeckOut) -> None:
        """list -> deck-editor"""
        self._require(ViewState.LIST, action="open a deck")
        await self._enter_deck_editor(deck)

    def back_to_list(self) -> None:
        """deck-editor -> list"""
        self._require(ViewState.DECK_EDITOR, action="go back to the deck list")
        self.state = ViewState.LIST
        self.selected_deck = None
        self.selected_slide = None
        self.slides = []
        self.navigator = None

    async def _enter_deck_editor(self, deck: DeckOut) -> None:
        """Load the slide list of ``deck`` and show it in the deck editor."""
        try:
            slides = await self.api.list_slides(deck.id)
        except ApiError:
            self._log.exception("viewer.open_deck_failed", deck_id=deck.id)
            raise
        self.selected_deck = deck
        self.slides = slides
        self.selected_slide = None
        self.navigator = None
        self.state = ViewState.DECK_EDITOR

    # deck editor

    async def rename_deck(self, name: str) -> DeckOut:
        self._require(ViewState.DECK_EDITOR, action="rename the deck")
        try:
            deck = await self.api.update_deck(self.selected_deck.id, name)
        except ApiError:
            self._log.exception("viewer.rename_deck_failed")
            raise
        self.selected_deck = deck
        return deck

    async def add_slide(
        self,
        title: str,
        body_text: Optional[str] = None,
        image_url: Optional[str] = None,
        slide_order: Optional[int] = None,
    ) -> SlideOut:
        """Append a slide; without an explicit order it goes after the last one."""
        self._require(ViewState.DECK_EDITOR, action="add a slide")
        if slide_order is None:
            slide_order = len(self.slides) + 1
        try:
            slide = await self.api.create_slide(
                deck_id=self.selected_deck.id,
                title=title,
                slide_order=slide_order,
                body_text=body_text,
                image_url=image_url,
            )
        except ApiError:
            self._log.exception("viewer.add_slide_failed")
            raise
        self.slides = sorted([*self.slides, slide], key=lambda s: s.slide_order)
        return slide

    async def remove_slide(self, slide_id: int) -> None:
        self._require(ViewState.DECK_EDITOR, action="remove a slide")
        try:
            await self.api.delete_slide(slide_id)
        except ApiError:
            self._log.exception("viewer.remove_slide_failed", slide_id=slide_id)
            raise
        self.slides = [s for s in self.slides if s.id != slide_id]

    def open_slide(self, slide: SlideOut) -> None:
        """deck-editor -> slide-editor"""
        self._require(ViewState.DECK_EDITOR, action="open a slide")
        self.selected_slide = slide
        self.state = ViewState.SLIDE_EDITOR

    # slide editor

    async def save_slide(self, changes: SlideChanges) -> SlideOut:
        self._require(ViewState.SLIDE_EDITOR, action="save the slide")
        try:
            slide = await self.api.update_slide(self.selected_slide.id, changes)
        except ApiError:
            self._log.exception("viewer.save_slide_failed")
            raise
        self.selected_slide = slide
        return slide

    async def close_slide_editor(self) -> None:
        """slide-editor -> deck-editor, reloading the slide list."""
        self._require(ViewState.SLIDE_EDITOR, action="close the slide editor")
        await self._enter_deck_editor(self.selected_deck)

    # presentation

    async def start_presentation(
        self, deck: Optional[DeckOut] = None
    ) -> Optional[SlideNavigator]:
        """
        Enter the presentation view for ``deck`` (default: the open deck).

        Always fetches deck and slides afresh. If the deck is gone the view
        does not change.
        """
        deck = deck or self.selected_deck
        if deck is None:
            raise InvalidTransitionError(self.state, "start a presentation")

        try:
            data = await self.api.get_deck_with_slides(deck.id)
        except ApiError:
            self._log.exception("viewer.presentation_load_failed", deck_id=deck.id)
            raise
        if data is None:
            self._log.warning("viewer.presentation_deck_missing", deck_id=deck.id)
            return self.navigator

        self.selected_deck = deck
        self.navigator = SlideNavigator.for_presentation(data)
        self.state = ViewState.PRESENTATION
        return self.navigator

    async def exit_presentation(self) -> None:
        """presentation -> deck-editor for the presented deck."""
        self._require(ViewState.PRESENTATION, action="exit the presentation")
        await self._enter_deck_editor(self.selected_deck)

    async def perform(self, action: Optional[NavAction]) -> None:
        self._require(ViewState.PRESENTATION, action="navigate slides")
        if action is NavAction.EXIT:
            await self.exit_presentation()
        elif action is NavAction.NEXT:
            self.navigator.next()
        elif action is NavAction.PREVIOUS:
            self.navigator.previous()

    async def handle_key(self, key: str) -> None:
        await self.perform(action_for_key(key))

    async def handle_click(self, x: float, width: float) -> None:
        await self.perform(action_for_click(x, width))
