"""Accounts module: registration, login sessions and request authentication."""

# User relationships reference the link models by name
import linkhub.features.links.models  # noqa: F401
from linkhub.features.accounts.deps import (
    DatabaseSessionResolver,
    SessionResolver,
    get_current_user,
    get_session_resolver,
)
from linkhub.features.accounts.routes import router
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.accounts.service import AccountService

__all__ = [
    "AccountService",
    "DatabaseSessionResolver",
    "SessionResolver",
    "SessionUser",
    "get_current_user",
    "get_session_resolver",
    "router",
]
