"""Global test configuration and fixtures."""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before the app reads its settings
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_FORMAT"] = "console"

from app.application.unit_of_work import UnitOfWork
from app.infra.config.database import Database
from app.main import create_app
from app.viewer.api_client import DeckApiClient

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Database fixtures
@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory store with tables created."""
    db = Database(TEST_DATABASE_URL)
    await db.initialize()
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def uow(db_session) -> UnitOfWork:
    return UnitOfWork(db_session)


# API fixtures
@pytest.fixture
def app(database):
    """FastAPI application bound to the test database."""
    return create_app(database=database)


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def api_client(async_client) -> AsyncGenerator[DeckApiClient, None]:
    """Viewer-side API client talking to the in-process app."""
    async with DeckApiClient(client=async_client) as client:
        yield client


# Helpers
@pytest.fixture
def create_deck(async_client):
    async def _create(name: str = "Demo") -> dict:
        response = await async_client.post("/api/v1/decks", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_slide(async_client):
    async def _create(deck_id: int, title: str, slide_order: int, **extra) -> dict:
        payload = {"deck_id": deck_id, "title": title, "slide_order": slide_order}
        payload.update(extra)
        response = await async_client.post("/api/v1/slides", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "/unit/" in path:
            item.add_marker(pytest.mark.unit)
        if "/integration/" in path:
            item.add_marker(pytest.mark.integration)
        if "/api/" in path:
            item.add_marker(pytest.mark.api)
        if "/e2e/" in path:
            item.add_marker(pytest.mark.e2e)
