"""Pydantic schemas for the analytics report.

Fields are snake_case in Python and serialized as camelCase.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from linkhub.shared.schemas import CamelModel

ClickType = Literal["shortlink", "listitem"]


class AnalyticsOverview(CamelModel):
    """Headline counts across all of a user's links.

    Totals come from the per-link click counters, not from click events,
    so they cover all time regardless of the requested window.
    """

    total_shortlinks: int = Field(..., ge=0, description="Number of short links owned.")
    active_shortlinks: int = Field(..., ge=0, description="Short links with the active flag set.")
    total_shortlink_clicks: int = Field(..., ge=0, description="Sum of short link click counters.")
    total_linklists: int = Field(..., ge=0, description="Number of link lists owned.")
    total_list_items: int = Field(..., ge=0, description="Items across all link lists.")
    total_list_clicks: int = Field(..., ge=0, description="Sum of list item click counters.")
    total_clicks: int = Field(
        ...,
        ge=0,
        description="total_shortlink_clicks + total_list_clicks.",
    )


class ClicksOnDate(CamelModel):
    """Click count for one UTC calendar date."""

    date: str = Field(..., description="UTC date, YYYY-MM-DD.")
    clicks: int = Field(..., ge=1)


class TopShortlink(CamelModel):
    """A ranked short link."""

    id: int
    name: str = Field(..., description="Custom alias if set, otherwise the short code.")
    clicks: int = Field(..., ge=0)


class TopListItem(CamelModel):
    """A ranked list item tagged with its parent list."""

    id: int
    title: str
    clicks: int = Field(..., ge=0)
    list_title: str


class RecentClick(CamelModel):
    """A click in the recent-activity preview."""

    date: datetime = Field(..., description="When the click happened.")
    type: ClickType


class AnalyticsReport(CamelModel):
    """Full analytics report for one user and window."""

    overview: AnalyticsOverview
    clicks_over_time: list[ClicksOnDate] = Field(
        ...,
        description="Clicks per date inside the window, ascending. Dates without clicks are omitted.",
    )
    top_shortlinks: list[TopShortlink] = Field(..., description="Most clicked short links, descending.")
    top_list_items: list[TopListItem] = Field(..., description="Most clicked list items, descending.")
    recent_clicks: list[RecentClick] = Field(..., description="Latest clicks inside the window, newest first.")
