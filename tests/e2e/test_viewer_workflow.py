"""
End-to-end: drive the viewer state machine against the in-process API.
"""

import pytest

from app.domain_core.entities import SlideChanges
from app.domain_core.value_objects.field_update import CLEAR, Set
from app.viewer import (
    ApiError,
    InvalidTransitionError,
    NavAction,
    ViewController,
    ViewState,
)


@pytest.fixture
def controller(api_client) -> ViewController:
    return ViewController(api_client)


async def test_list_to_editor_to_slide_editor(controller):
    deck = await controller.create_deck("Demo")
    assert controller.state is ViewState.LIST
    assert [d.name for d in await controller.refresh_decks()] == ["Demo"]

    await controller.open_deck(deck)
    assert controller.state is ViewState.DECK_EDITOR
    assert [s.title for s in controller.slides] == ["First Slide"]

    added = await controller.add_slide("Agenda", body_text="1. Intro")
    assert added.slide_order == 2

    controller.open_slide(added)
    assert controller.state is ViewState.SLIDE_EDITOR

    saved = await controller.save_slide(
        SlideChanges(title=Set("Agenda v2"), body_text=CLEAR)
    )
    assert saved.title == "Agenda v2"
    assert saved.body_text is None

    await controller.close_slide_editor()
    assert controller.state is ViewState.DECK_EDITOR
    assert [s.title for s in controller.slides] == ["First Slide", "Agenda v2"]

    controller.back_to_list()
    assert controller.state is ViewState.LIST
    assert controller.selected_deck is None


async def test_presentation_navigation(controller):
    deck = await controller.create_deck("Talk")
    await controller.open_deck(deck)
    await controller.add_slide("Two")
    await controller.add_slide("Three")

    navigator = await controller.start_presentation()
    assert controller.state is ViewState.PRESENTATION
    assert navigator.status_line() == "Talk • Slide 1 of 3"

    await controller.handle_key("ArrowLeft")
    assert navigator.current.title == "Three"

    await controller.handle_key(" ")
    assert navigator.current.title == "First Slide"

    await controller.handle_click(x=950, width=1000)
    assert navigator.current.title == "Two"

    await controller.handle_click(x=500, width=1000)
    assert navigator.current.title == "Two"

    await controller.handle_key("Escape")
    assert controller.state is ViewState.DECK_EDITOR
    assert controller.selected_deck.id == deck.id


async def test_presentation_fetches_fresh_data(controller, api_client):
    deck = await controller.create_deck("Fresh")
    await controller.open_deck(deck)

    # Written behind the controller's back
    await api_client.create_slide(deck.id, "Late addition", 5)

    navigator = await controller.start_presentation()
    assert [s.title for s in navigator.slides] == ["First Slide", "Late addition"]


async def test_presenting_empty_deck_offers_only_exit(controller, api_client):
    deck = await controller.create_deck("Empty")
    slides = await api_client.list_slides(deck.id)
    await api_client.delete_slide(slides[0].id)

    navigator = await controller.start_presentation(deck)

    assert controller.state is ViewState.PRESENTATION
    assert navigator.is_empty
    assert navigator.available_actions() == [NavAction.EXIT]

    await controller.handle_key("ArrowRight")
    assert navigator.current is None

    await controller.perform(NavAction.EXIT)
    assert controller.state is ViewState.DECK_EDITOR


async def test_presenting_deleted_deck_keeps_state(controller, api_client):
    deck = await controller.create_deck("Gone")
    await api_client.delete_deck(deck.id)

    navigator = await controller.start_presentation(deck)

    assert navigator is None
    assert controller.state is ViewState.LIST


async def test_failed_call_leaves_state_intact(controller, api_client):
    deck = await controller.create_deck("Deck")
    await controller.open_deck(deck)
    slide = controller.slides[0]
    controller.open_slide(slide)

    await api_client.delete_slide(slide.id)

    with pytest.raises(ApiError) as excinfo:
        await controller.save_slide(SlideChanges(title=Set("x")))

    assert excinfo.value.is_not_found
    assert controller.state is ViewState.SLIDE_EDITOR
    assert controller.selected_slide == slide


async def test_invalid_transitions(controller):
    with pytest.raises(InvalidTransitionError):
        await controller.handle_key("ArrowRight")

    with pytest.raises(InvalidTransitionError):
        await controller.start_presentation()


async def test_rename_and_delete_from_views(controller):
    deck = await controller.create_deck("Draft")
    await controller.open_deck(deck)

    renamed = await controller.rename_deck("Final")
    assert renamed.name == "Final"

    controller.back_to_list()
    await controller.delete_deck(deck.id)
    assert controller.decks == []
    assert await controller.refresh_decks() == []


async def test_presentation_only_exits_to_presented_deck(controller, api_client):
    presented = await controller.create_deck("Presented")
    other = await controller.create_deck("Other")
    await controller.open_deck(presented)
    await controller.start_presentation()

    with pytest.raises(InvalidTransitionError):
        controller.back_to_list()
    with pytest.raises(InvalidTransitionError):
        await controller.open_deck(other)
    assert controller.state is ViewState.PRESENTATION

    await controller.exit_presentation()
    assert controller.state is ViewState.DECK_EDITOR
    assert controller.selected_deck.id == presented.id
    fetched = await api_client.get_deck(presented.id)
    assert (fetched.id, fetched.name) == (presented.id, "Presented")


async def test_open_deck_requires_list_view(controller):
    first = await controller.create_deck("First")
    second = await controller.create_deck("Second")
    await controller.open_deck(first)

    with pytest.raises(InvalidTransitionError):
        await controller.open_deck(second)
    assert controller.selected_deck.id == first.id


async def test_back_to_list_requires_deck_editor(controller):
    with pytest.raises(InvalidTransitionError):
        controller.back_to_list()


async def test_client_get_deck_returns_none_for_missing(api_client):
    assert await api_client.get_deck(999) is None
