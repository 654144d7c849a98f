"""
Deck repository for data access operations.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.models.base import fits_integer
from app.data.models.deck_model import DeckModel
from app.domain_core.entities.deck import Deck
from app.domain_core.entities.timestamps import as_utc, next_timestamp
from app.infra.config.logging_config import get_logger


class DeckRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.deck")

    async def create(self, deck: Deck) -> Deck:
        """Create a new deck."""
        deck_model = DeckModel(
            name=deck.name,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
        )

        self.session.add(deck_model)
        await self.session.flush()  # Get the ID without committing

        deck.id = deck_model.id
        self._log.info("deck.create", deck_id=deck.id)
        return deck

    async def get_by_id(self, deck_id: int) -> Optional[Deck]:
        """Get deck by ID."""
        deck_model = await self._get_model(deck_id)

        if not deck_model:
            self._log.info("deck.get.not_found", deck_id=deck_id)
            return None

        self._log.info("deck.get", deck_id=deck_id)
        return self._to_entity(deck_model)

    async def exists(self, deck_id: int) -> bool:
        if not fits_integer(deck_id):
            return False
        result = await self.session.execute(
            select(DeckModel.id).where(DeckModel.id == deck_id)
        )
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> List[Deck]:
        """All decks, most recently touched first."""
        result = await self.session.execute(
            select(DeckModel).order_by(DeckModel.updated_at.desc(), DeckModel.id.desc())
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("deck.list", count=len(items))
        return items

    async def update(self, deck: Deck) -> Deck:
        """Persist name and updated_at; created_at is never written."""
        await self.session.execute(
            update(DeckModel)
            .where(DeckModel.id == deck.id)
            .values(name=deck.name, updated_at=deck.updated_at)
        )
        self._log.info("deck.update", deck_id=deck.id)
        return deck

    async def delete(self, deck_id: int) -> bool:
        """Delete a deck. Slides go with it through the FK cascade."""
        if not fits_integer(deck_id):
            self._log.info("deck.delete", deck_id=deck_id, deleted=False)
            return False
        result = await self.session.execute(
            delete(DeckModel).where(DeckModel.id == deck_id)
        )
        deleted = result.rowcount > 0
        self._log.info("deck.delete", deck_id=deck_id, deleted=deleted)
        return deleted

    async def touch(self, deck_id: int) -> Optional[datetime]:
        """Refresh a deck's updated_at after one of its slides changed.

        Returns the new timestamp, or None when the deck is gone.
        """
        deck_model = await self._get_model(deck_id)
        if not deck_model:
            self._log.warning("deck.touch.not_found", deck_id=deck_id)
            return None

        touched_at = next_timestamp(deck_model.updated_at)
        deck_model.updated_at = touched_at
        await self.session.flush()
        self._log.info("deck.touch", deck_id=deck_id)
        return touched_at

    async def _get_model(self, deck_id: int) -> Optional[DeckModel]:
        if not fits_integer(deck_id):
            # No row can carry an id outside the column range
            return None
        result = await self.session.execute(
            select(DeckModel).where(DeckModel.id == deck_id)
        )
        return result.scalar_one_or_none()

    def _to_entity(self, model: DeckModel) -> Deck:
        """Convert SQLAlchemy model to domain entity."""
        return Deck(
            id=model.id,
            name=model.name,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
