"""
Unit of Work pattern implementation for transaction boundaries.

The Unit of Work owns one AsyncSession and hands out the repositories that
share it, so a slide write and the touch of its parent deck commit together.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.data.repositories.deck_repository import DeckRepository
from app.data.repositories.slide_repository import SlideRepository


class UnitOfWork:
    """
    Unit of Work implementation that manages transaction boundaries
    and provides access to repositories within a transaction context.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.deck_repo = DeckRepository(session)
        self.slide_repo = SlideRepository(session)
        self._committed = False

    async def __aenter__(self):
        """Enter transaction context."""
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit transaction context; anything not committed is rolled back."""
        if exc_type is not None or not self._committed:
            await self.rollback()

    async def commit(self):
        """Commit the transaction."""
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        """Rollback the transaction."""
        await self.session.rollback()

    @property
    def is_committed(self) -> bool:
        """Check if the transaction has been committed."""
        return self._committed
