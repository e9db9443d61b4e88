"""Unit tests for the points ledger aggregator."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pathway.services.progression_engine.points_ledger import (
	aggregate_points,
	filter_entries_for_period,
	summarize_points,
	validate_period,
	week_start,
)


def entry(user, points, earned_at, reason="video_complete", period_week=None):
	return {
		"user": user,
		"points": points,
		"reason": reason,
		"earned_at": earned_at,
		"period_week": period_week,
	}


@pytest.mark.parametrize("value, expected", [
	(date(2025, 1, 13), date(2025, 1, 13)),  # Monday
	(date(2025, 1, 15), date(2025, 1, 13)),  # Wednesday
	(date(2025, 1, 19), date(2025, 1, 13)),  # Sunday
	("2025-01-20", date(2025, 1, 20)),
	(datetime(2025, 1, 16, 23, 59), date(2025, 1, 13)),
])
def test_week_start_is_monday(value, expected):
	assert week_start(value) == expected


def test_week_start_uses_utc_for_aware_datetimes():
	"""01:00 on a Monday at UTC+5 is still Sunday in UTC."""
	value = datetime(2025, 1, 13, 1, 0, tzinfo=timezone(timedelta(hours=5)))

	assert week_start(value) == date(2025, 1, 6)


def test_week_start_requires_a_date():
	with pytest.raises(ValueError):
		week_start(None)


def test_aggregate_points_sums_per_user():
	entries = [
		entry("alice@example.com", 10, "2025-01-14"),
		entry("bob@example.com", 5, "2025-01-14"),
		entry("alice@example.com", 15, "2025-01-15"),
	]

	assert aggregate_points(entries) == {"alice@example.com": 25, "bob@example.com": 5}


def test_aggregate_points_empty():
	assert aggregate_points([]) == {}


def test_weekly_filter_uses_period_week():
	today = date(2025, 1, 15)
	entries = [
		entry("alice@example.com", 10, datetime(2025, 1, 13, 8, 0), period_week=date(2025, 1, 13)),
		entry("alice@example.com", 5, datetime(2025, 1, 12, 8, 0), period_week=date(2025, 1, 6)),
		entry("bob@example.com", 7, datetime(2025, 1, 14, 8, 0)),
	]

	weekly = filter_entries_for_period(entries, "weekly", today)

	assert [e["points"] for e in weekly] == [10, 7]
	assert len(filter_entries_for_period(entries, "all_time", today)) == 3


def test_unknown_period_raises():
	with pytest.raises(ValueError, match="Unknown period"):
		validate_period("monthly")


def test_summarize_points():
	today = date(2025, 1, 15)
	entries = [
		entry("alice@example.com", 10, datetime(2025, 1, 14, 9, 0), "video_complete", date(2025, 1, 13)),
		entry("alice@example.com", 5, datetime(2025, 1, 6, 10, 0), "worksheet_complete", date(2025, 1, 6)),
		entry("alice@example.com", 15, datetime(2024, 12, 30, 10, 0), "bold_action_complete", date(2024, 12, 30)),
	]

	summary = summarize_points(entries, today)

	assert summary["total_points"] == 30
	assert summary["week_points"] == 10
	assert summary["month_points"] == 15
	assert summary["breakdown"] == {
		"video_complete": 10,
		"worksheet_complete": 5,
		"bold_action_complete": 15,
	}
	assert summary["recent"][0]["points"] == 10


def test_summarize_points_keeps_ten_newest():
	entries = [
		entry("alice@example.com", 1, datetime(2025, 1, 1, 8, 0) + timedelta(hours=hour))
		for hour in range(12)
	]

	recent = summarize_points(entries, date(2025, 1, 2))["recent"]

	assert len(recent) == 10
	assert recent[0]["earned_at"] == datetime(2025, 1, 1, 19, 0)


def test_summarize_points_empty():
	summary = summarize_points([], date(2025, 1, 15))

	assert summary["total_points"] == 0
	assert summary["breakdown"] == {}
	assert summary["recent"] == []
