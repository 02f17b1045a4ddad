"""Test fixtures for accounts module."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from linkhub.core.database import get_db
from linkhub.features.accounts.models import User
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.accounts.security import hash_password
from linkhub.features.accounts.tests.fakes import PASSWORD, result_with
from linkhub.main import app


@pytest.fixture
def mock_db() -> AsyncMock:
    """AsyncSession stand-in; ``add`` is synchronous on the real session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = result_with(None)
    return session


@pytest.fixture
def sample_user() -> User:
    """Persisted-looking user with a known password."""
    return User(
        id=1,
        username="alice",
        email="alice@example.com",
        password_hash=hash_password(PASSWORD),
        created_at=datetime(2024, 1, 15, 9, 0, tzinfo=UTC),
    )


@pytest.fixture
def session_user() -> SessionUser:
    return SessionUser(user_id=1, username="alice", session_id=10)


@pytest.fixture
async def client(mock_db: AsyncMock):
    """Async client with the database dependency replaced by ``mock_db``."""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
