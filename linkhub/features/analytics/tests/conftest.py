"""Test fixtures for analytics module."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from linkhub.features.accounts.deps import get_current_user
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.analytics.repository import (
    ClickRecord,
    LinkListItemRecord,
    LinkListRecord,
    ShortlinkRecord,
    get_analytics_repository,
)
from linkhub.features.analytics.tests.fakes import NOW, InMemoryAnalyticsRepository
from linkhub.main import app


@pytest.fixture
def session_user() -> SessionUser:
    """Authenticated identity used by analytics tests."""
    return SessionUser(user_id=1, username="alice", session_id=10)


@pytest.fixture
def sample_shortlinks() -> list[ShortlinkRecord]:
    """Two short links with 5 and 10 clicks, fetched low-first."""
    return [
        ShortlinkRecord(id=2, short_code="b5b5b5", custom_alias=None, clicks=5, is_active=False),
        ShortlinkRecord(id=1, short_code="a1a1a1", custom_alias="launch", clicks=10, is_active=True),
    ]


@pytest.fixture
def sample_link_lists() -> list[LinkListRecord]:
    """One list with one item of 3 clicks."""
    return [
        LinkListRecord(
            id=1,
            title="My Links",
            items=[LinkListItemRecord(id=7, title="Blog", clicks=3)],
        )
    ]


@pytest.fixture
def sample_events() -> list[ClickRecord]:
    """Clicks spread over three days inside a 30-day window."""
    return [
        ClickRecord(clicked_at=NOW - timedelta(hours=1), shortlink_id=1),
        ClickRecord(clicked_at=NOW - timedelta(hours=2), list_item_id=7),
        ClickRecord(clicked_at=NOW - timedelta(days=1), shortlink_id=2),
        ClickRecord(clicked_at=NOW - timedelta(days=3), shortlink_id=1),
        ClickRecord(clicked_at=NOW - timedelta(days=3, hours=1), shortlink_id=1),
    ]


@pytest.fixture
def repository(sample_shortlinks, sample_link_lists, sample_events) -> InMemoryAnalyticsRepository:
    """Repository seeded with the scenario data."""
    return InMemoryAnalyticsRepository(
        shortlinks=sample_shortlinks,
        link_lists=sample_link_lists,
        events=sample_events,
    )


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async client; dependency overrides are cleared afterwards."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def authenticated(session_user: SessionUser, repository: InMemoryAnalyticsRepository):
    """Install a signed-in user and the in-memory repository on the app."""
    app.dependency_overrides[get_current_user] = lambda: session_user
    app.dependency_overrides[get_analytics_repository] = lambda: repository
    return repository
