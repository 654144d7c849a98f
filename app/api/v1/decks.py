"""
Deck endpoints: list, read, create, rename, delete, plus the slide list and
the one-shot presentation payload of a deck.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from app.api.dependencies import (
    get_deck_use_cases,
    get_load_presentation_use_case,
    get_slide_use_cases,
)
from app.api.schemas import (
    CreateDeckRequest,
    DeckOut,
    DeckWithSlidesOut,
    SlideOut,
    SuccessResponse,
    UpdateDeckRequest,
)
from app.application.use_cases.load_presentation import LoadPresentationUseCase
from app.application.use_cases.manage_decks import DeckUseCases
from app.application.use_cases.manage_slides import SlideUseCases
from app.infra.config.logging_config import get_logger

router = APIRouter(prefix="/decks", tags=["decks"])
log = get_logger("api.decks")


@router.get("", response_model=List[DeckOut])
async def list_decks(decks: DeckUseCases = Depends(get_deck_use_cases)):
    """All decks, most recently updated first."""
    return await decks.list_decks()


@router.post("", response_model=DeckOut, status_code=status.HTTP_201_CREATED)
async def create_deck(
    request: CreateDeckRequest,
    decks: DeckUseCases = Depends(get_deck_use_cases),
):
    """Create a deck; it starts with a single "First Slide"."""
    deck = await decks.create_deck(request.name)
    log.info("deck.created", deck_id=deck.id)
    return deck


@router.get("/{deck_id}", response_model=Optional[DeckOut])
async def get_deck(deck_id: int, decks: DeckUseCases = Depends(get_deck_use_cases)):
    """The deck, or null when it does not exist."""
    return await decks.get_deck(deck_id)


@router.put("/{deck_id}", response_model=DeckOut)
async def update_deck(
    deck_id: int,
    request: UpdateDeckRequest,
    decks: DeckUseCases = Depends(get_deck_use_cases),
):
    return await decks.update_deck(deck_id, request.name)


@router.delete("/{deck_id}", response_model=SuccessResponse)
async def delete_deck(
    deck_id: int, decks: DeckUseCases = Depends(get_deck_use_cases)
) -> SuccessResponse:
    """Delete a deck and its slides. Deleting an unknown deck still succeeds."""
    await decks.delete_deck(deck_id)
    return SuccessResponse()


@router.get("/{deck_id}/slides", response_model=List[SlideOut])
async def list_slides(
    deck_id: int, slides: SlideUseCases = Depends(get_slide_use_cases)
):
    """Slides of a deck ordered by slide_order."""
    return await slides.list_slides(deck_id)


@router.get("/{deck_id}/presentation", response_model=Optional[DeckWithSlidesOut])
async def get_deck_with_slides(
    deck_id: int,
    presentation: LoadPresentationUseCase = Depends(get_load_presentation_use_case),
):
    """Deck plus all slides in playback order, or null."""
    return await presentation.execute(deck_id)
