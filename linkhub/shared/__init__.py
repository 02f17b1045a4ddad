"""Shared utilities used across features."""

from linkhub.shared.models import CreatedAtMixin, TimestampMixin
from linkhub.shared.schemas import CamelModel

__all__ = [
    "CamelModel",
    "CreatedAtMixin",
    "TimestampMixin",
]
