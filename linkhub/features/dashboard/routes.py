"""API routes for the dashboard summary."""

from fastapi import APIRouter, Depends

from linkhub.features.accounts.deps import get_current_user
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.analytics.repository import AnalyticsRepository, get_analytics_repository
from linkhub.features.analytics.service import AnalyticsService
from linkhub.features.dashboard.schemas import DashboardResponse, DashboardStats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Dashboard stat cards",
)
async def get_dashboard(
    current_user: SessionUser = Depends(get_current_user),
    repository: AnalyticsRepository = Depends(get_analytics_repository),
) -> DashboardResponse:
    """Return link counts and all-time clicks for the signed-in user."""
    overview = await AnalyticsService().get_overview(repository, current_user)
    return DashboardResponse(
        username=current_user.username,
        stats=DashboardStats(
            total_shortlinks=overview.total_shortlinks,
            active_shortlinks=overview.active_shortlinks,
            total_linklists=overview.total_linklists,
            total_clicks=overview.total_clicks,
        ),
    )
