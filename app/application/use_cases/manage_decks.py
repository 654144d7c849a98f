"""
Use Case: Manage Decks

Listing, reading, creating, renaming and deleting slide decks. Creating a
deck also seeds its default first slide in the same transaction.
"""

from typing import List, Optional

from app.application.unit_of_work import UnitOfWork
from app.domain_core.entities.deck import Deck
from app.domain_core.entities.slide import Slide
from app.domain_core.exceptions import DeckNotFoundError
from app.infra.config.logging_config import bind_context, get_logger


class DeckUseCases:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.decks")

    async def list_decks(self) -> List[Deck]:
        async with self.uow:
            return await self.uow.deck_repo.list_all()

    async def get_deck(self, deck_id: int) -> Optional[Deck]:
        """Return the deck, or None when it does not exist."""
        async with self.uow:
            return await self.uow.deck_repo.get_by_id(deck_id)

    async def create_deck(self, name: str) -> Deck:
        """
        Create a deck together with its default "First Slide".

        Returns the created deck, not the slide.
        """
        self._log.info("usecase.start", action="create_deck")
        deck = Deck.new(name)

        async with self.uow:
            deck = await self.uow.deck_repo.create(deck)
            await self.uow.slide_repo.create(Slide.default_for(deck.id))
            await self.uow.commit()

        bind_context(deck_id=deck.id)
        self._log.info("usecase.success", action="create_deck")
        return deck

    async def update_deck(self, deck_id: int, name: str) -> Deck:
        bind_context(deck_id=deck_id)
        self._log.info("usecase.start", action="update_deck")

        async with self.uow:
            deck = await self.uow.deck_repo.get_by_id(deck_id)
            if not deck:
                self._log.warning("usecase.not_found", action="update_deck")
                raise DeckNotFoundError(deck_id)

            deck.rename(name)
            deck = await self.uow.deck_repo.update(deck)
            await self.uow.commit()

        self._log.info("usecase.success", action="update_deck")
        return deck

    async def delete_deck(self, deck_id: int) -> bool:
        """Delete a deck and its slides. A missing deck is not an error."""
        bind_context(deck_id=deck_id)
        async with self.uow:
            deleted = await self.uow.deck_repo.delete(deck_id)
            await self.uow.commit()

        self._log.info("usecase.success", action="delete_deck", deleted=deleted)
        return deleted
