"""
Database configuration and session management.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.data.models import Base
from app.infra.config.logging_config import get_logger

logger = get_logger("database")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with FK enforcement off; cascade deletes depend on it.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the async engine and session factory for one store."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    async def initialize(self) -> None:
        logger.info("database.initialize", url=self.database_url)
        kwargs = {"echo": self.echo}
        if self.is_sqlite and ":memory:" in self.database_url:
            # One shared connection, otherwise every session sees an empty db
            kwargs.update(
                poolclass=StaticPool, connect_args={"check_same_thread": False}
            )
        elif not self.is_sqlite:
            kwargs.update(pool_pre_ping=True, pool_recycle=300)

        self.engine = create_async_engine(self.database_url, **kwargs)
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create the slide_decks and slides tables if missing."""
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database.tables_created")

    async def drop_all(self) -> None:
        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        if self.engine:
            logger.info("database.close")
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on success and rolls back on error."""
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("database.health_check_failed", error=str(e))
            return False

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self.engine


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the database attached at startup."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database session.

    Yields an async database session and ensures proper cleanup. Commits are
    left to the unit of work.
    """
    database: Database = request.app.state.database
    if not database.session_factory:
        raise RuntimeError("Database not initialized. Call initialize() first.")

    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
