"""Account ORM models: users and issued login sessions."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkhub.core.database import Base
from linkhub.shared.models import CreatedAtMixin, TimestampMixin

if TYPE_CHECKING:
    from linkhub.features.links.models import LinkList, Shortlink


class User(TimestampMixin, Base):
    """Registered user.

    Attributes:
        id: Primary key.
        username: Unique login name.
        email: Unique email address (stored lowercase).
        password_hash: passlib hash of the password.
    """

    # "user" is reserved in PostgreSQL
    __tablename__ = "app_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(30), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(254), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    shortlinks: Mapped[list[Shortlink]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    link_lists: Mapped[list[LinkList]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sessions: Mapped[list[AuthSession]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AuthSession(CreatedAtMixin, Base):
    """Issued login session.

    Only the SHA-256 digest of the opaque token is stored.

    Attributes:
        id: Primary key.
        user_id: Session owner.
        token_hash: Hex digest of the session token.
        expires_at: Instant after which the session no longer resolves.
    """

    __tablename__ = "auth_session"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("app_user.id", ondelete="CASCADE"), index=True)
    token_hash: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    expires_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), index=True)

    user: Mapped[User] = relationship(back_populates="sessions")
