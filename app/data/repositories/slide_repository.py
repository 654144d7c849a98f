"""
Slide repository for data access operations.
"""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.data.models.base import fits_integer
from app.data.models.slide_model import SlideModel
from app.domain_core.entities.slide import Slide
from app.domain_core.entities.timestamps import as_utc
from app.infra.config.logging_config import get_logger


class SlideRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.slide")

    async def create(self, slide: Slide) -> Slide:
        """Create a new slide."""
        slide_model = SlideModel(
            deck_id=slide.deck_id,
            title=slide.title,
            body_text=slide.body_text,
            image_url=slide.image_url,
            slide_order=slide.slide_order,
            created_at=slide.created_at,
            updated_at=slide.updated_at,
        )

        self.session.add(slide_model)
        await self.session.flush()  # Get the ID without committing

        slide.id = slide_model.id
        self._log.info("slide.create", slide_id=slide.id, deck_id=slide.deck_id)
        return slide

    async def get_by_id(self, slide_id: int) -> Optional[Slide]:
        """Get slide by ID."""
        if not fits_integer(slide_id):
            self._log.info("slide.get.not_found", slide_id=slide_id)
            return None
        result = await self.session.execute(
            select(SlideModel).where(SlideModel.id == slide_id)
        )
        slide_model = result.scalar_one_or_none()

        if not slide_model:
            self._log.info("slide.get.not_found", slide_id=slide_id)
            return None

        self._log.info("slide.get", slide_id=slide_id)
        return self._to_entity(slide_model)

    async def get_by_deck_id(self, deck_id: int) -> List[Slide]:
        """Get all slides for a deck ordered by slide_order, then insertion."""
        if not fits_integer(deck_id):
            return []
        result = await self.session.execute(
            select(SlideModel)
            .where(SlideModel.deck_id == deck_id)
            .order_by(SlideModel.slide_order.asc(), SlideModel.id.asc())
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("slide.list", deck_id=deck_id, count=len(items))
        return items

    async def update(self, slide: Slide) -> Slide:
        """Update an existing slide."""
        await self.session.execute(
            update(SlideModel)
            .where(SlideModel.id == slide.id)
            .values(
                title=slide.title,
                body_text=slide.body_text,
                image_url=slide.image_url,
                slide_order=slide.slide_order,
                updated_at=slide.updated_at,
            )
        )
        self._log.info("slide.update", slide_id=slide.id)
        return slide

    async def delete(self, slide_id: int) -> bool:
        """Delete a slide."""
        if not fits_integer(slide_id):
            return False
        result = await self.session.execute(
            delete(SlideModel).where(SlideModel.id == slide_id)
        )
        deleted = result.rowcount > 0
        self._log.info("slide.delete", slide_id=slide_id, deleted=deleted)
        return deleted

    def _to_entity(self, model: SlideModel) -> Slide:
        """Convert SQLAlchemy model to domain entity."""
        return Slide(
            id=model.id,
            deck_id=model.deck_id,
            title=model.title,
            body_text=model.body_text,
            image_url=model.image_url,
            slide_order=model.slide_order,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
