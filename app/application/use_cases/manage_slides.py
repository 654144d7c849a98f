"""
Use Case: Manage Slides

Every slide write touches the parent deck's updated_at inside the same
transaction, so the deck list reflects slide activity.
"""

from typing import List, Optional

from app.application.unit_of_work import UnitOfWork
from app.domain_core.entities.slide import Slide, SlideChanges
from app.domain_core.exceptions import DeckNotFoundError, SlideNotFoundError
from app.infra.config.logging_config import bind_context, get_logger


class SlideUseCases:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.slides")

    async def list_slides(self, deck_id: int) -> List[Slide]:
        """Slides of a deck in playback order; unknown decks yield []."""
        async with self.uow:
            return await self.uow.slide_repo.get_by_deck_id(deck_id)

    async def create_slide(
        self,
        deck_id: int,
        title: str,
        slide_order: int,
        body_text: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Slide:
        """
        Add a slide to an existing deck.

        Raises:
            DeckNotFoundError: if deck_id does not reference a deck. Nothing
                is inserted in that case.
        """
        bind_context(deck_id=deck_id)
        self._log.info("usecase.start", action="create_slide", slide_order=slide_order)
        slide = Slide.new(
            deck_id=deck_id,
            title=title,
            slide_order=slide_order,
            body_text=body_text,
            image_url=image_url,
        )

        async with self.uow:
            if not await self.uow.deck_repo.exists(deck_id):
                self._log.warning("usecase.not_found", action="create_slide")
                raise DeckNotFoundError(deck_id)

            slide = await self.uow.slide_repo.create(slide)
            await self.uow.deck_repo.touch(deck_id)
            await self.uow.commit()

        self._log.info("usecase.success", action="create_slide", slide_id=slide.id)
        return slide

    async def update_slide(self, slide_id: int, changes: SlideChanges) -> Slide:
        """Apply a partial update; fields left UNSET keep their value."""
        bind_context(slide_id=slide_id)
        self._log.info(
            "usecase.start", action="update_slide", fields=changes.changed_fields()
        )

        async with self.uow:
            slide = await self.uow.slide_repo.get_by_id(slide_id)
            if not slide:
                self._log.warning("usecase.not_found", action="update_slide")
                raise SlideNotFoundError(slide_id)

            slide.apply(changes)
            slide = await self.uow.slide_repo.update(slide)
            await self.uow.deck_repo.touch(slide.deck_id)
            await self.uow.commit()

        self._log.info("usecase.success", action="update_slide")
        return slide

    async def delete_slide(self, slide_id: int) -> None:
        """
        Delete a slide.

        Raises:
            SlideNotFoundError: unlike deck deletion, a missing slide fails.
        """
        bind_context(slide_id=slide_id)

        async with self.uow:
            slide = await self.uow.slide_repo.get_by_id(slide_id)
            if not slide:
                self._log.warning("usecase.not_found", action="delete_slide")
                raise SlideNotFoundError(slide_id)

            await self.uow.slide_repo.delete(slide_id)
            await self.uow.deck_repo.touch(slide.deck_id)
            await self.uow.commit()

        self._log.info("usecase.success", action="delete_slide", deck_id=slide.deck_id)
