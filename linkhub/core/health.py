"""Liveness and readiness endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from linkhub.core.config import get_settings
from linkhub.core.database import get_db
from linkhub.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: Literal["ok", "unhealthy"]
    environment: str
    database: Literal["connected", "disconnected"] | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up. Never touches the database."""
    return HealthResponse(status="ok", environment=get_settings().app_env)


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(
    db: AsyncSession = Depends(get_db),
) -> HealthResponse:
    """Readiness check including database connectivity.

    Args:
        db: Database session dependency.

    Returns:
        Health status with database state.
    """
    environment = get_settings().app_env
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(
            "health.database_disconnected",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        return HealthResponse(status="unhealthy", environment=environment, database="disconnected")

    return HealthResponse(status="ok", environment=environment, database="connected")
