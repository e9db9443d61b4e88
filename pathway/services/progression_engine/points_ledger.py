"""
Points Ledger Aggregator - fold point-earning events into totals.

The points ledger is an append-only log of awards. This module only sums
what it is given: filtering to a population (organization or team) happens
when entries are loaded, and duplicate prevention happens when they are
written.

Weekly periods start on Monday 00:00 UTC. week_start() is the single
definition of that boundary and is used both when an entry's period_week
is stored and when the current week is queried.
"""

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from pathway.services.progression_engine.constants import PERIOD_ALL_TIME, PERIODS
from pathway.services.progression_engine.dates import DateLike, to_date

logger = logging.getLogger(__name__)

RECENT_ENTRIES_LIMIT = 10


def week_start(value: DateLike) -> date:
	"""Return the Monday of the week containing value.

	Args:
		value: Date, datetime (aware values are taken in UTC) or ISO string

	Returns:
		Monday of that week as a date
	"""
	day = to_date(value)
	if day is None:
		raise ValueError("week_start requires a date")
	return day - timedelta(days=day.weekday())


def validate_period(period: str) -> str:
	if period not in PERIODS:
		raise ValueError(f"Unknown period '{period}', expected one of {', '.join(PERIODS)}")
	return period


def entry_period_week(entry: Dict[str, Any]) -> Optional[date]:
	"""Period week of an entry, derived from earned_at when not stored."""
	stored = to_date(entry.get("period_week"))
	if stored:
		return stored
	earned_at = entry.get("earned_at")
	return week_start(earned_at) if earned_at else None


def filter_entries_for_period(entries: Iterable[Dict[str, Any]], period: str, today: date) -> List[Dict[str, Any]]:
	"""Keep the entries that fall in the requested period.

	Args:
		entries: Points ledger entries
		period: 'weekly' or 'all_time'
		today: Reference date for the current week

	Returns:
		Filtered list of entries
	"""
	validate_period(period)
	if period == PERIOD_ALL_TIME:
		return list(entries)

	current_week = week_start(today)
	return [entry for entry in entries if entry_period_week(entry) == current_week]


def aggregate_points(entries: Iterable[Dict[str, Any]]) -> Dict[str, int]:
	"""Sum points per user.

	Args:
		entries: Points ledger entries with user and points

	Returns:
		Mapping of user id to total points
	"""
	totals = defaultdict(int)
	count = 0
	for entry in entries:
		totals[entry["user"]] += int(entry.get("points") or 0)
		count += 1

	logger.debug(f"Aggregated {count} ledger entries for {len(totals)} users")
	return dict(totals)


def summarize_points(entries: Iterable[Dict[str, Any]], today: date) -> Dict[str, Any]:
	"""Summarize a single user's ledger.

	Args:
		entries: The user's points ledger entries
		today: Reference date for the week and month totals

	Returns:
		Dictionary with total_points, week_points, month_points,
		breakdown (points per reason) and recent (newest entries first)
	"""
	entries = list(entries)
	current_week = week_start(today)
	month_start = today.replace(day=1)

	total = 0
	week_total = 0
	month_total = 0
	breakdown = defaultdict(int)

	for entry in entries:
		points = int(entry.get("points") or 0)
		total += points
		breakdown[entry.get("reason")] += points

		if entry_period_week(entry) == current_week:
			week_total += points

		earned_on = to_date(entry.get("earned_at"))
		if earned_on and month_start <= earned_on <= today:
			month_total += points

	recent = sorted(entries, key=lambda entry: str(entry.get("earned_at") or ""), reverse=True)

	return {
		"total_points": total,
		"week_points": week_total,
		"month_points": month_total,
		"breakdown": dict(breakdown),
		"recent": recent[:RECENT_ENTRIES_LIMIT],
	}
