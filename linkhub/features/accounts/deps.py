"""Request authentication dependencies.

The session resolver turns a request into a verified ``SessionUser`` or
None. Handlers receive the identity explicitly through ``get_current_user``;
nothing reads session state from a global.
"""

from typing import Protocol

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.core.config import get_settings
from linkhub.core.database import get_db
from linkhub.core.exceptions import UnauthorizedError
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.accounts.service import AccountService


class SessionResolver(Protocol):
    """Resolves the identity behind a request."""

    async def resolve(self, request: Request) -> SessionUser | None: ...


def extract_session_tokens(request: Request) -> list[str]:
    """Collect candidate session tokens, session cookie first.

    A Bearer token is kept as a fallback so a stale cookie does not hide a
    valid ``Authorization`` header.

    Args:
        request: Incoming request.

    Returns:
        Distinct raw tokens in lookup order; empty if the request carries none.
    """
    tokens: list[str] = []
    cookie = request.cookies.get(get_settings().session_cookie_name)
    if cookie:
        tokens.append(cookie)

    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    bearer = credentials.strip()
    if scheme.lower() == "bearer" and bearer and bearer not in tokens:
        tokens.append(bearer)
    return tokens


class DatabaseSessionResolver:
    """Looks session tokens up in the ``auth_session`` table."""

    def __init__(self, db: AsyncSession, service: AccountService | None = None) -> None:
        self.db = db
        self.service = service or AccountService()

    async def resolve(self, request: Request) -> SessionUser | None:
        for token in extract_session_tokens(request):
            user = await self.service.resolve_token(self.db, token)
            if user is not None:
                return user
        return None


def get_session_resolver(db: AsyncSession = Depends(get_db)) -> SessionResolver:
    """Provide the default database-backed resolver."""
    return DatabaseSessionResolver(db)


async def get_current_user(
    request: Request,
    resolver: SessionResolver = Depends(get_session_resolver),
) -> SessionUser:
    """Require a verified session.

    Args:
        request: Incoming request.
        resolver: Session resolver.

    Returns:
        The authenticated identity.

    Raises:
        UnauthorizedError: If the request has no valid session.
    """
    user = await resolver.resolve(request)
    if user is None:
        raise UnauthorizedError()
    return user
