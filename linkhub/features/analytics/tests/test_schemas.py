"""Tests for analytics schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from linkhub.features.analytics.schemas import (
    AnalyticsOverview,
    ClicksOnDate,
    RecentClick,
    TopListItem,
)


class TestAnalyticsOverview:
    """Tests for AnalyticsOverview."""

    def test_serializes_camel_case(self):
        overview = AnalyticsOverview(
            total_shortlinks=2,
            active_shortlinks=1,
            total_shortlink_clicks=15,
            total_linklists=1,
            total_list_items=1,
            total_list_clicks=3,
            total_clicks=18,
        )

        assert overview.model_dump(by_alias=True) == {
            "totalShortlinks": 2,
            "activeShortlinks": 1,
            "totalShortlinkClicks": 15,
            "totalLinklists": 1,
            "totalListItems": 1,
            "totalListClicks": 3,
            "totalClicks": 18,
        }

    def test_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            AnalyticsOverview(
                total_shortlinks=-1,
                active_shortlinks=0,
                total_shortlink_clicks=0,
                total_linklists=0,
                total_list_items=0,
                total_list_clicks=0,
                total_clicks=0,
            )


class TestClicksOnDate:
    """Tests for ClicksOnDate."""

    def test_zero_clicks_rejected(self):
        with pytest.raises(ValidationError):
            ClicksOnDate(date="2024-06-01", clicks=0)


class TestTopListItem:
    """Tests for TopListItem."""

    def test_list_title_alias(self):
        item = TopListItem(id=1, title="Blog", clicks=3, list_title="My Links")
        assert item.model_dump(by_alias=True)["listTitle"] == "My Links"

    def test_accepts_camel_case_input(self):
        item = TopListItem.model_validate({"id": 1, "title": "Blog", "clicks": 3, "listTitle": "X"})
        assert item.list_title == "X"


class TestRecentClick:
    """Tests for RecentClick."""

    def test_json_timestamp(self):
        click = RecentClick(date=datetime(2024, 6, 1, 9, 30, tzinfo=UTC), type="shortlink")

        assert click.model_dump(mode="json") == {
            "date": "2024-06-01T09:30:00Z",
            "type": "shortlink",
        }

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            RecentClick(date=datetime(2024, 6, 1, tzinfo=UTC), type="qr")
