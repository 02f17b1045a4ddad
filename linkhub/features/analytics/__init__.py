"""Analytics module: per-user click reports.

Provides the ``GET /analytics`` endpoint with link totals, a daily click
series, top performers and a recent-click preview.
"""

from linkhub.features.analytics.repository import (
    AnalyticsRepository,
    SqlAnalyticsRepository,
    get_analytics_repository,
)
from linkhub.features.analytics.routes import router
from linkhub.features.analytics.schemas import AnalyticsOverview, AnalyticsReport
from linkhub.features.analytics.service import AnalyticsService

__all__ = [
    "AnalyticsOverview",
    "AnalyticsReport",
    "AnalyticsRepository",
    "AnalyticsService",
    "SqlAnalyticsRepository",
    "get_analytics_repository",
    "router",
]
