"""Password hashing, session tokens and input sanitizing."""

import hashlib
import re
import secrets
from functools import lru_cache

from passlib.context import CryptContext

from linkhub.core.config import get_settings

_ANGLE_BRACKETS = re.compile(r"[<>]")


@lru_cache
def get_password_context() -> CryptContext:
    """Build the passlib context from configured schemes (first is default)."""
    return CryptContext(schemes=get_settings().password_hash_schemes, deprecated="auto")


def hash_password(password: str) -> str:
    return get_password_context().hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return get_password_context().verify(plain, hashed)


def generate_session_token() -> str:
    """Return a new opaque, URL-safe session token."""
    return secrets.token_urlsafe(32)


def hash_session_token(token: str) -> str:
    """Digest stored in place of the raw token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def sanitize_input(value: str) -> str:
    """Trim whitespace and drop angle brackets from user-supplied text."""
    return _ANGLE_BRACKETS.sub("", value).strip()
