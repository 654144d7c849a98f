"""
Use Case: Load Presentation

Fetches a deck and all of its slides in one call so playback never needs
another round trip.
"""

from typing import Optional

from app.application.unit_of_work import UnitOfWork
from app.domain_core.entities.deck import DeckWithSlides
from app.infra.config.logging_config import get_logger


class LoadPresentationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.load_presentation")

    async def execute(self, deck_id: int) -> Optional[DeckWithSlides]:
        async with self.uow:
            deck = await self.uow.deck_repo.get_by_id(deck_id)
            if not deck:
                return None
            slides = await self.uow.slide_repo.get_by_deck_id(deck_id)

        self._log.info("presentation.loaded", deck_id=deck_id, slide_count=len(slides))
        return DeckWithSlides.compose(deck, slides)
