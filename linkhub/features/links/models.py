"""Link ORM models: short links, curated link lists and click events.

Ownership:
- User 1..* Shortlink
- User 1..* LinkList 1..* LinkListItem
- ClickEvent *..1 Shortlink XOR LinkListItem

Click counters on Shortlink and LinkListItem are maintained by the redirect
write path; readers trust them for totals and use ClickEvent rows only for
time series and recency.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkhub.core.database import Base
from linkhub.shared.models import TimestampMixin

if TYPE_CHECKING:
    from linkhub.features.accounts.models import User


class Shortlink(TimestampMixin, Base):
    """User-owned redirect record.

    Attributes:
        id: Primary key.
        user_id: Owning user.
        original_url: Redirect destination.
        short_code: Generated unique code.
        custom_alias: Optional user-chosen unique alias.
        clicks: Cumulative click counter.
        is_active: Whether the redirect is served.
    """

    __tablename__ = "shortlink"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("app_user.id", ondelete="CASCADE"), index=True)
    original_url: Mapped[str] = mapped_column(Text)
    short_code: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    custom_alias: Mapped[str | None] = mapped_column(String(64), unique=True, nullable=True)
    clicks: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default="true")

    user: Mapped[User] = relationship(back_populates="shortlinks")
    click_events: Mapped[list[ClickEvent]] = relationship(
        back_populates="shortlink",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (CheckConstraint("clicks >= 0", name="ck_shortlink_clicks_non_negative"),)


class LinkList(TimestampMixin, Base):
    """User-owned curated page of links.

    Attributes:
        id: Primary key.
        user_id: Owning user.
        title: Page title.
        description: Optional page description.
    """

    __tablename__ = "link_list"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("app_user.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    user: Mapped[User] = relationship(back_populates="link_lists")
    items: Mapped[list[LinkListItem]] = relationship(
        back_populates="link_list",
        order_by="LinkListItem.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class LinkListItem(TimestampMixin, Base):
    """Entry on a LinkList.

    Attributes:
        id: Primary key.
        list_id: Parent list.
        title: Display title.
        url: Destination URL.
        position: Ordering key within the list.
        clicks: Cumulative click counter.
    """

    __tablename__ = "link_list_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    list_id: Mapped[int] = mapped_column(ForeignKey("link_list.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    url: Mapped[str] = mapped_column(Text)
    position: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    clicks: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    link_list: Mapped[LinkList] = relationship(back_populates="items")
    click_events: Mapped[list[ClickEvent]] = relationship(
        back_populates="list_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("clicks >= 0", name="ck_link_list_item_clicks_non_negative"),
        Index("ix_link_list_item_list_position", "list_id", "position"),
    )


class ClickEvent(Base):
    """Immutable record of a single click.

    Exactly one of ``shortlink_id`` / ``list_item_id`` is set.

    Attributes:
        id: Primary key.
        shortlink_id: Clicked short link, if any.
        list_item_id: Clicked list item, if any.
        clicked_at: When the click happened.
    """

    __tablename__ = "click_event"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    shortlink_id: Mapped[int | None] = mapped_column(
        ForeignKey("shortlink.id", ondelete="CASCADE"), nullable=True, index=True
    )
    list_item_id: Mapped[int | None] = mapped_column(
        ForeignKey("link_list_item.id", ondelete="CASCADE"), nullable=True, index=True
    )
    clicked_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )

    shortlink: Mapped[Shortlink | None] = relationship(back_populates="click_events")
    list_item: Mapped[LinkListItem | None] = relationship(back_populates="click_events")

    __table_args__ = (
        CheckConstraint(
            "(shortlink_id IS NULL) <> (list_item_id IS NULL)",
            name="ck_click_event_single_target",
        ),
    )
