"""
API dependencies for dependency injection.

Each request gets its own session; use cases receive a UnitOfWork built on it.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.unit_of_work import UnitOfWork
from app.application.use_cases.load_presentation import LoadPresentationUseCase
from app.application.use_cases.manage_decks import DeckUseCases
from app.application.use_cases.manage_slides import SlideUseCases
from app.infra.config.database import get_db_session


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> UnitOfWork:
    return UnitOfWork(session)


async def get_deck_use_cases(uow: UnitOfWork = Depends(get_unit_of_work)) -> DeckUseCases:
    return DeckUseCases(uow)


async def get_slide_use_cases(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> SlideUseCases:
    return SlideUseCases(uow)


async def get_load_presentation_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> LoadPresentationUseCase:
    return LoadPresentationUseCase(uow)
