"""Test fixtures for core module."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from linkhub.core.database import get_db
from linkhub.main import app


@pytest.fixture
async def client():
    """Create async HTTP client for testing FastAPI endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_db():
    """Install an AsyncMock session in place of the database dependency."""
    session = AsyncMock()

    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    return session
