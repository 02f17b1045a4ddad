"""API routes for registration and session management."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.core.config import get_settings
from linkhub.core.database import get_db
from linkhub.core.exceptions import NotFoundError
from linkhub.features.accounts.deps import get_current_user
from linkhub.features.accounts.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    SessionUser,
    UserOut,
)
from linkhub.features.accounts.service import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="""
Create a user account.

**Validation**:
- `username`: 3-30 characters, letters, digits, `_` or `-`
- `email`: valid email address
- `password`: 8-128 characters

**Errors**:
- 400 `Email already registered` / `Username already taken`
- 422 invalid payload
""",
)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> RegisterResponse:
    """Register a user.

    Args:
        payload: Registration data.
        db: Database session.

    Returns:
        Confirmation with the created user's public profile.
    """
    user = await AccountService().register(db, payload)
    return RegisterResponse(
        message="User registered successfully",
        user=UserOut.model_validate(user),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in and start a session",
)
async def login(
    payload: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Check credentials and issue a session token.

    The token is returned in the body and set as an HttpOnly cookie; either
    can be presented on later requests.
    """
    settings = get_settings()
    service = AccountService()

    user = await service.authenticate(db, payload.username, payload.password)
    token, session = await service.create_session(db, user)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return LoginResponse(
        message="Logged in",
        token=token,
        expires_at=session.expires_at,
        user=UserOut.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse, summary="End the current session")
async def logout(
    response: Response,
    current_user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Revoke the presented session and clear the cookie."""
    if current_user.session_id is not None:
        await AccountService().revoke_session(db, current_user.session_id)
    response.delete_cookie(get_settings().session_cookie_name)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserOut, summary="Current user profile")
async def me(
    current_user: SessionUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserOut:
    """Return the signed-in user's profile."""
    user = await AccountService().get_user(db, current_user.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserOut.model_validate(user)
