"""In-memory stand-ins for analytics data access."""

from datetime import UTC, datetime

from sqlalchemy.exc import OperationalError

from linkhub.features.analytics.repository import ClickRecord, LinkListRecord, ShortlinkRecord

NOW = datetime(2024, 6, 30, 12, 0, tzinfo=UTC)


class InMemoryAnalyticsRepository:
    """AnalyticsRepository over plain lists, recording every call."""

    def __init__(
        self,
        shortlinks: list[ShortlinkRecord] | None = None,
        link_lists: list[LinkListRecord] | None = None,
        events: list[ClickRecord] | None = None,
        fail: bool = False,
    ) -> None:
        self.shortlinks = shortlinks or []
        self.link_lists = link_lists or []
        self.events = events or []
        self.fail = fail
        self.calls: list[tuple] = []

    def _maybe_fail(self) -> None:
        if self.fail:
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    async def list_shortlinks(self, user_id: int) -> list[ShortlinkRecord]:
        self.calls.append(("list_shortlinks", user_id))
        self._maybe_fail()
        return list(self.shortlinks)

    async def list_link_lists_with_items(self, user_id: int) -> list[LinkListRecord]:
        self.calls.append(("list_link_lists_with_items", user_id))
        self._maybe_fail()
        return list(self.link_lists)

    async def list_click_events(self, user_id: int, since: datetime | None) -> list[ClickRecord]:
        self.calls.append(("list_click_events", user_id, since))
        self._maybe_fail()
        selected = [e for e in self.events if since is None or e.clicked_at >= since]
        return sorted(selected, key=lambda e: e.clicked_at, reverse=True)
