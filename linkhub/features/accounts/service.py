"""Service layer for account operations.

Handles registration, credential checks and session issuance. Sessions are
opaque random tokens; only their SHA-256 digest is persisted.
"""

import asyncio
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from linkhub.core.config import get_settings
from linkhub.core.exceptions import BadRequestError, UnauthorizedError
from linkhub.core.logging import get_logger
from linkhub.features.accounts.models import AuthSession, User
from linkhub.features.accounts.schemas import RegisterRequest, SessionUser
from linkhub.features.accounts.security import (
    generate_session_token,
    hash_password,
    hash_session_token,
    sanitize_input,
    verify_password,
)

logger = get_logger(__name__)


class AccountService:
    """Registration, login and session lookups."""

    def __init__(self) -> None:
        """Initialize account service."""
        self.settings = get_settings()

    async def register(self, db: AsyncSession, request: RegisterRequest) -> User:
        """Create a new user account.

        Args:
            db: Database session.
            request: Validated registration payload.

        Returns:
            The persisted user.

        Raises:
            BadRequestError: If the email or username is already taken.
        """
        username = sanitize_input(request.username)
        email = sanitize_input(str(request.email)).lower()

        stmt = select(User).where(or_(User.email == email, User.username == username)).limit(1)
        existing = (await db.execute(stmt)).scalar_one_or_none()
        if existing is not None:
            message = "Email already registered" if existing.email == email else "Username already taken"
            logger.info("accounts.registration_rejected", reason=message, username=username)
            raise BadRequestError(message)

        password_hash = await asyncio.to_thread(hash_password, request.password)
        user = User(username=username, email=email, password_hash=password_hash)
        db.add(user)
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.info("accounts.registration_conflict", username=username)
            raise BadRequestError("Username or email already registered") from e
        await db.refresh(user)

        logger.info("security.user_registered", user_id=user.id, username=user.username)
        return user

    async def authenticate(self, db: AsyncSession, login: str, password: str) -> User:
        """Check credentials against a username or email.

        Args:
            db: Database session.
            login: Username or email.
            password: Plain-text password.

        Returns:
            The matching user.

        Raises:
            UnauthorizedError: If no user matches or the password is wrong.
        """
        login = sanitize_input(login)
        stmt = select(User).where(or_(User.username == login, User.email == login.lower()))
        user = (await db.execute(stmt)).scalar_one_or_none()

        if user is None or not await asyncio.to_thread(
            verify_password, password, user.password_hash
        ):
            logger.warning("security.login_failed", login=login)
            raise UnauthorizedError("Invalid credentials")

        return user

    async def create_session(self, db: AsyncSession, user: User) -> tuple[str, AuthSession]:
        """Issue a new session for ``user``.

        Args:
            db: Database session.
            user: Authenticated user.

        Returns:
            The raw token (shown to the client once) and the stored session.
        """
        token = generate_session_token()
        session = AuthSession(
            user_id=user.id,
            token_hash=hash_session_token(token),
            expires_at=datetime.now(UTC) + timedelta(minutes=self.settings.session_ttl_minutes),
        )
        db.add(session)
        await db.commit()
        await db.refresh(session)

        logger.info("security.login_succeeded", user_id=user.id, session_id=session.id)
        return token, session

    async def resolve_token(self, db: AsyncSession, token: str) -> SessionUser | None:
        """Map a raw session token to the identity behind it.

        Args:
            db: Database session.
            token: Raw token presented by the client.

        Returns:
            The identity, or None for unknown or expired tokens.
        """
        stmt = (
            select(AuthSession)
            .options(joinedload(AuthSession.user))
            .where(
                AuthSession.token_hash == hash_session_token(token),
                AuthSession.expires_at > datetime.now(UTC),
            )
        )
        session = (await db.execute(stmt)).scalar_one_or_none()
        if session is None:
            return None

        return SessionUser(
            user_id=session.user_id,
            username=session.user.username,
            session_id=session.id,
        )

    async def revoke_session(self, db: AsyncSession, session_id: int) -> None:
        """Delete a session so its token stops resolving."""
        await db.execute(delete(AuthSession).where(AuthSession.id == session_id))
        await db.commit()
        logger.info("security.session_revoked", session_id=session_id)

    async def get_user(self, db: AsyncSession, user_id: int) -> User | None:
        return await db.get(User, user_id)
