"""Core infrastructure: config, database, logging, middleware, exceptions."""

from linkhub.core.config import Settings, get_settings
from linkhub.core.database import Base, get_db
from linkhub.core.logging import get_logger, request_id_ctx

__all__ = [
    "Base",
    "Settings",
    "get_db",
    "get_logger",
    "get_settings",
    "request_id_ctx",
]
