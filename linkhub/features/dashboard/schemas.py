"""Pydantic schemas for the dashboard summary."""

from pydantic import Field

from linkhub.shared.schemas import CamelModel


class DashboardStats(CamelModel):
    """Headline stat cards."""

    total_shortlinks: int = Field(..., ge=0)
    active_shortlinks: int = Field(..., ge=0)
    total_linklists: int = Field(..., ge=0)
    total_clicks: int = Field(..., ge=0, description="All-time clicks across short links and list items.")


class DashboardResponse(CamelModel):
    """Dashboard payload for the signed-in user."""

    username: str = Field(..., description="Name used in the welcome greeting.")
    stats: DashboardStats
