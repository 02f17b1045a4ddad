"""Dashboard module: headline stats for the signed-in user."""

from linkhub.features.dashboard.routes import router
from linkhub.features.dashboard.schemas import DashboardResponse, DashboardStats

__all__ = [
    "DashboardResponse",
    "DashboardStats",
    "router",
]
