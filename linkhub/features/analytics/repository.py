"""Read-only data access for analytics.

``AnalyticsRepository`` is the contract the aggregator consumes; the
SQLAlchemy implementation backs it in production and tests substitute an
in-memory one.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from fastapi import Depends
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from linkhub.core.database import get_db
from linkhub.features.links.models import ClickEvent, LinkList, LinkListItem, Shortlink

# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class ShortlinkRecord:
    """Shortlink fields the aggregator reads."""

    id: int
    short_code: str
    custom_alias: str | None
    clicks: int
    is_active: bool


@dataclass(frozen=True)
class LinkListItemRecord:
    """List item fields the aggregator reads."""

    id: int
    title: str
    clicks: int


@dataclass(frozen=True)
class LinkListRecord:
    """A link list with its items in display order."""

    id: int
    title: str
    items: list[LinkListItemRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ClickRecord:
    """A click event reduced to its timestamp and target reference."""

    clicked_at: datetime
    shortlink_id: int | None = None
    list_item_id: int | None = None


# =============================================================================
# Contract
# =============================================================================


class AnalyticsRepository(Protocol):
    """Read operations over a user's links and clicks."""

    async def list_shortlinks(self, user_id: int) -> list[ShortlinkRecord]: ...

    async def list_link_lists_with_items(self, user_id: int) -> list[LinkListRecord]: ...

    async def list_click_events(self, user_id: int, since: datetime | None) -> list[ClickRecord]:
        """Clicks on the user's links at or after ``since``, newest first.

        ``since=None`` means no lower bound.
        """
        ...


# =============================================================================
# SQLAlchemy implementation
# =============================================================================


class SqlAnalyticsRepository:
    """AnalyticsRepository over the relational store."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_shortlinks(self, user_id: int) -> list[ShortlinkRecord]:
        stmt = (
            select(
                Shortlink.id,
                Shortlink.short_code,
                Shortlink.custom_alias,
                Shortlink.clicks,
                Shortlink.is_active,
            )
            .where(Shortlink.user_id == user_id)
            .order_by(Shortlink.id)
        )
        result = await self.db.execute(stmt)
        return [
            ShortlinkRecord(
                id=row.id,
                short_code=row.short_code,
                custom_alias=row.custom_alias,
                clicks=row.clicks,
                is_active=row.is_active,
            )
            for row in result
        ]

    async def list_link_lists_with_items(self, user_id: int) -> list[LinkListRecord]:
        stmt = (
            select(LinkList)
            .options(selectinload(LinkList.items))
            .where(LinkList.user_id == user_id)
            .order_by(LinkList.id)
        )
        result = await self.db.execute(stmt)
        return [
            LinkListRecord(
                id=link_list.id,
                title=link_list.title,
                items=[
                    LinkListItemRecord(id=item.id, title=item.title, clicks=item.clicks)
                    for item in link_list.items
                ],
            )
            for link_list in result.scalars()
        ]

    async def list_click_events(self, user_id: int, since: datetime | None) -> list[ClickRecord]:
        stmt = (
            select(ClickEvent.clicked_at, ClickEvent.shortlink_id, ClickEvent.list_item_id)
            .outerjoin(Shortlink, ClickEvent.shortlink_id == Shortlink.id)
            .outerjoin(LinkListItem, ClickEvent.list_item_id == LinkListItem.id)
            .outerjoin(LinkList, LinkListItem.list_id == LinkList.id)
            .where(or_(Shortlink.user_id == user_id, LinkList.user_id == user_id))
            .order_by(ClickEvent.clicked_at.desc(), ClickEvent.id.desc())
        )
        if since is not None:
            stmt = stmt.where(ClickEvent.clicked_at >= since)

        result = await self.db.execute(stmt)
        return [
            ClickRecord(
                clicked_at=row.clicked_at,
                shortlink_id=row.shortlink_id,
                list_item_id=row.list_item_id,
            )
            for row in result
        ]


def get_analytics_repository(db: AsyncSession = Depends(get_db)) -> AnalyticsRepository:
    """Provide the SQLAlchemy-backed repository for the request."""
    return SqlAnalyticsRepository(db)
