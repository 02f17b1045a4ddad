"""API routes for click analytics."""

from fastapi import APIRouter, Depends, Query

from linkhub.core.config import get_settings
from linkhub.features.accounts.deps import get_current_user
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.analytics.repository import AnalyticsRepository, get_analytics_repository
from linkhub.features.analytics.schemas import AnalyticsReport
from linkhub.features.analytics.service import AnalyticsService, parse_window_days

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get(
    "",
    response_model=AnalyticsReport,
    summary="Click analytics for the signed-in user",
    description="""
Summarize the signed-in user's links and clicks.

**Report sections**:
- `overview`: link counts and all-time click totals (from click counters)
- `clicksOverTime`: clicks per UTC date inside the window, ascending; dates
  without clicks are omitted
- `topShortlinks`: top 5 short links by clicks, named by alias or code
- `topListItems`: top 5 list items by clicks, with their list title
- `recentClicks`: latest 10 clicks inside the window

**Window**: `days` trailing days, inclusive of the boundary instant.
Values are read by their leading integer, so `7.5` means 7 days. Values with
no leading digits, and negative values, use 30 days. There is no upper bound.

**Example**: `GET /analytics?days=7`
""",
)
async def get_analytics(
    current_user: SessionUser = Depends(get_current_user),
    repository: AnalyticsRepository = Depends(get_analytics_repository),
    days: str | None = Query(
        None,
        description="Trailing window in days, read by its leading integer. Defaults to 30.",
    ),
) -> AnalyticsReport:
    """Compute the analytics report for the current user.

    Args:
        current_user: Authenticated identity.
        repository: Read access to the user's links and clicks.
        days: Raw window length.

    Returns:
        Analytics report.
    """
    window_days = parse_window_days(days, get_settings().analytics_default_window_days)
    return await AnalyticsService().get_analytics(repository, current_user, window_days)
