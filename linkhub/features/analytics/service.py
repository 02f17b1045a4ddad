"""Service layer for click analytics.

Builds a user's report from three reads (short links, link lists with items,
click events in the window). Totals trust the per-link click counters; the
raw events only feed the daily series and the recent-click preview.
"""

import re
from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from linkhub.core.config import get_settings
from linkhub.core.exceptions import DatabaseError
from linkhub.core.logging import get_logger
from linkhub.features.accounts.schemas import SessionUser
from linkhub.features.analytics.repository import (
    AnalyticsRepository,
    ClickRecord,
    LinkListRecord,
    ShortlinkRecord,
)
from linkhub.features.analytics.schemas import (
    AnalyticsOverview,
    AnalyticsReport,
    ClicksOnDate,
    RecentClick,
    TopListItem,
    TopShortlink,
)

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# =============================================================================
# Window
# =============================================================================


def parse_window_days(raw: str | None, default: int) -> int:
    """Parse the ``days`` query value by its leading integer.

    ``"7.5"`` reads as 7 and ``"10days"`` as 10. Values with no leading
    digits, and negative values, fall back to ``default``.

    Args:
        raw: Raw query string value.
        default: Window used when ``raw`` is unusable.

    Returns:
        Window length in days.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    days = int(match.group(1))
    return days if days >= 0 else default


def window_start(now: datetime, days: int) -> datetime | None:
    """Return ``now - days``, or None when that predates ``datetime.min``.

    None means the window has no lower bound.
    """
    try:
        return now - timedelta(days=days)
    except OverflowError:
        return None


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps come from stores without timezone support and are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# =============================================================================
# Aggregation
# =============================================================================


def summarize_overview(
    shortlinks: Sequence[ShortlinkRecord],
    link_lists: Sequence[LinkListRecord],
) -> AnalyticsOverview:
    """Count links and sum their click counters."""
    total_shortlink_clicks = sum(link.clicks for link in shortlinks)
    total_list_clicks = sum(item.clicks for link_list in link_lists for item in link_list.items)

    return AnalyticsOverview(
        total_shortlinks=len(shortlinks),
        active_shortlinks=sum(1 for link in shortlinks if link.is_active),
        total_shortlink_clicks=total_shortlink_clicks,
        total_linklists=len(link_lists),
        total_list_items=sum(len(link_list.items) for link_list in link_lists),
        total_list_clicks=total_list_clicks,
        total_clicks=total_shortlink_clicks + total_list_clicks,
    )


def bucket_clicks_by_date(events: Sequence[ClickRecord]) -> list[ClicksOnDate]:
    """Count events per UTC calendar date, ascending.

    The series is sparse: dates without events are not emitted.
    """
    per_day = Counter(_as_utc(event.clicked_at).date().isoformat() for event in events)
    return [ClicksOnDate(date=day, clicks=count) for day, count in sorted(per_day.items())]


def rank_top_shortlinks(shortlinks: Sequence[ShortlinkRecord], limit: int) -> list[TopShortlink]:
    """Most clicked short links first; ties keep fetch order."""
    ranked = sorted(shortlinks, key=lambda link: link.clicks, reverse=True)[:limit]
    return [
        TopShortlink(id=link.id, name=link.custom_alias or link.short_code, clicks=link.clicks)
        for link in ranked
    ]


def rank_top_list_items(link_lists: Sequence[LinkListRecord], limit: int) -> list[TopListItem]:
    """Most clicked items across all lists first; ties keep fetch order."""
    flattened = [
        TopListItem(id=item.id, title=item.title, clicks=item.clicks, list_title=link_list.title)
        for link_list in link_lists
        for item in link_list.items
    ]
    return sorted(flattened, key=lambda item: item.clicks, reverse=True)[:limit]


def preview_recent_clicks(events: Sequence[ClickRecord], limit: int) -> list[RecentClick]:
    """First ``limit`` events of the newest-first list, tagged by target type.

    Anything without a short link reference is reported as a list item click.
    """
    return [
        RecentClick(
            date=event.clicked_at,
            type="shortlink" if event.shortlink_id is not None else "listitem",
        )
        for event in events[:limit]
    ]


# =============================================================================
# Service
# =============================================================================


class AnalyticsService:
    """Computes per-user click analytics.

    Read-only: the report either completes from all three reads or the call
    fails with ``DatabaseError``.
    """

    def __init__(self) -> None:
        """Initialize analytics service."""
        self.settings = get_settings()

    async def get_analytics(
        self,
        repository: AnalyticsRepository,
        user: SessionUser,
        days: int,
        now: datetime | None = None,
    ) -> AnalyticsReport:
        """Build the analytics report for ``user``.

        Args:
            repository: Data access for the user's links and clicks.
            user: Authenticated identity.
            days: Trailing window in days for the click series and preview.
            now: Window anchor; defaults to the current UTC instant.

        Returns:
            The composed report.

        Raises:
            DatabaseError: If any read fails.
        """
        since = window_start(now or datetime.now(UTC), days)

        try:
            shortlinks = await repository.list_shortlinks(user.user_id)
            link_lists = await repository.list_link_lists_with_items(user.user_id)
            events = await repository.list_click_events(user.user_id, since)
        except SQLAlchemyError as e:
            logger.error(
                "analytics.query_failed",
                user_id=user.user_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise DatabaseError("Failed to load analytics") from e

        overview = summarize_overview(shortlinks, link_lists)
        report = AnalyticsReport(
            overview=overview,
            clicks_over_time=bucket_clicks_by_date(events),
            top_shortlinks=rank_top_shortlinks(shortlinks, self.settings.analytics_top_n),
            top_list_items=rank_top_list_items(link_lists, self.settings.analytics_top_n),
            recent_clicks=preview_recent_clicks(events, self.settings.analytics_recent_clicks_limit),
        )

        logger.info(
            "analytics.report_computed",
            user_id=user.user_id,
            window_days=days,
            since=since.isoformat() if since else None,
            events_in_window=len(events),
            total_clicks=overview.total_clicks,
        )
        return report

    async def get_overview(
        self,
        repository: AnalyticsRepository,
        user: SessionUser,
    ) -> AnalyticsOverview:
        """Headline counts only; skips the click event query.

        Raises:
            DatabaseError: If any read fails.
        """
        try:
            shortlinks = await repository.list_shortlinks(user.user_id)
            link_lists = await repository.list_link_lists_with_items(user.user_id)
        except SQLAlchemyError as e:
            logger.error(
                "analytics.query_failed",
                user_id=user.user_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise DatabaseError("Failed to load link statistics") from e

        return summarize_overview(shortlinks, link_lists)
