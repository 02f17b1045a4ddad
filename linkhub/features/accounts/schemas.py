"""Pydantic schemas for account endpoints.

Response bodies use camelCase keys to match the dashboard client.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from linkhub.shared.schemas import CamelModel

USERNAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# =============================================================================
# Requests
# =============================================================================


class RegisterRequest(BaseModel):
    """Registration payload."""

    username: str = Field(
        ...,
        min_length=3,
        max_length=30,
        pattern=USERNAME_PATTERN,
        description="Unique login name: letters, digits, '_' or '-'.",
    )
    email: EmailStr = Field(..., description="Unique email address.")
    password: str = Field(..., min_length=8, max_length=128, description="Account password.")


class LoginRequest(BaseModel):
    """Login payload. ``username`` also accepts the account email."""

    username: str = Field(..., min_length=1, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


# =============================================================================
# Responses
# =============================================================================


class UserOut(CamelModel):
    """Public user profile."""

    id: int
    username: str
    email: str
    created_at: datetime


class RegisterResponse(CamelModel):
    """Registration result."""

    message: str
    user: UserOut


class LoginResponse(CamelModel):
    """Login result carrying the issued session token."""

    message: str
    token: str
    expires_at: datetime
    user: UserOut


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


# =============================================================================
# Resolved identity
# =============================================================================


@dataclass(frozen=True)
class SessionUser:
    """Verified identity behind the current request.

    Attributes:
        user_id: Authenticated user's id.
        username: Authenticated user's name.
        session_id: Backing AuthSession row, when resolved from one.
    """

    user_id: int
    username: str
    session_id: int | None = None
