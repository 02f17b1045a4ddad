"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkhub.core.config import get_settings
from linkhub.core.database import get_engine
from linkhub.core.exceptions import register_exception_handlers
from linkhub.core.health import router as health_router
from linkhub.core.logging import configure_logging, get_logger
from linkhub.core.middleware import RequestIdMiddleware
from linkhub.features.accounts.routes import router as accounts_router
from linkhub.features.analytics.routes import router as analytics_router
from linkhub.features.dashboard.routes import router as dashboard_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown.

    Args:
        _app: FastAPI application instance (unused, required by lifespan protocol).

    Yields:
        None after startup; disposes the database engine on shutdown.
    """
    settings = get_settings()

    configure_logging()
    logger.info(
        "app.startup_started",
        app_name=settings.app_name,
        app_env=settings.app_env,
        debug=settings.debug,
    )

    yield

    if get_engine.cache_info().currsize:
        await get_engine().dispose()
    logger.info("app.shutdown_completed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Short links, link list pages and click analytics",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # First added = outermost
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"]
        if settings.is_development
        else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(accounts_router)
    app.include_router(dashboard_router)
    app.include_router(analytics_router)

    return app


app = create_app()
