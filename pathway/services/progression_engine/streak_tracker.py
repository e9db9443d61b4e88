"""
Streak Tracker - interpret and advance daily learning streaks.

Streak Logic (dates in UTC):
- First activity: 0 -> 1
- Same day: no change
- Next day (consecutive): N -> N+1, longest = max(longest, N+1)
- Gap > 1 day: reset to 1 (not 0)

interpret_streak() is read-only and is what leaderboards and dashboards
call. apply_activity() computes the next record for the activity recorder,
which is the only writer of User Streak documents.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from pathway.services.progression_engine.constants import STREAK_TYPE_DAILY
from pathway.services.progression_engine.dates import format_date, to_date, yesterday_of

logger = logging.getLogger(__name__)


def interpret_streak(record: Optional[Dict[str, Any]], today: date) -> Dict[str, Any]:
	"""Interpret a streak record as of today.

	A streak is at risk when it is still alive but the learner has not
	acted today: the last activity was yesterday, so the streak breaks at
	midnight unless they act.

	Args:
		record: User Streak record, or None when the user has no streak yet
		today: Evaluation date

	Returns:
		Dictionary with current_streak, longest_streak, last_activity_date,
		streak_start_date, total_active_days, total_activities and is_at_risk
	"""
	if not record:
		return {
			"current_streak": 0,
			"longest_streak": 0,
			"last_activity_date": None,
			"streak_start_date": None,
			"total_active_days": 0,
			"total_activities": 0,
			"is_at_risk": False,
		}

	current_streak = int(record.get("current_streak") or 0)
	last_activity_date = to_date(record.get("last_activity_date"))

	return {
		"current_streak": current_streak,
		"longest_streak": int(record.get("longest_streak") or 0),
		"last_activity_date": format_date(last_activity_date),
		"streak_start_date": format_date(to_date(record.get("streak_start_date"))),
		"total_active_days": int(record.get("total_active_days") or 0),
		"total_activities": int(record.get("total_activities") or 0),
		"is_at_risk": current_streak > 0 and last_activity_date == yesterday_of(today),
	}


def apply_activity(record: Optional[Dict[str, Any]], today: date) -> Dict[str, Any]:
	"""Compute the streak record after a qualifying activity today.

	The input record is not mutated.

	Args:
		record: Current User Streak record, or None for a first activity
		today: Date of the activity

	Returns:
		Updated record dictionary with an extra "streak_action" key:
		first_activity, maintained, incremented or reset
	"""
	record = dict(record or {})
	current_streak = int(record.get("current_streak") or 0)
	longest_streak = int(record.get("longest_streak") or 0)
	total_active_days = int(record.get("total_active_days") or 0)
	last_activity_date = to_date(record.get("last_activity_date"))
	streak_start_date = to_date(record.get("streak_start_date"))

	if last_activity_date is None:
		new_streak = 1
		streak_start_date = today
		total_active_days += 1
		action = "first_activity"
	elif last_activity_date >= today:
		# Already active today; a future date is left untouched
		new_streak = current_streak
		action = "maintained"
	elif last_activity_date == yesterday_of(today):
		new_streak = current_streak + 1
		total_active_days += 1
		action = "incremented"
	else:
		new_streak = 1
		streak_start_date = today
		total_active_days += 1
		action = "reset"

	if action != "maintained":
		last_activity_date = today

	logger.debug(f"Streak {action}: {current_streak} -> {new_streak}")

	record.update({
		"streak_type": record.get("streak_type") or STREAK_TYPE_DAILY,
		"current_streak": new_streak,
		"longest_streak": max(longest_streak, new_streak),
		"last_activity_date": last_activity_date,
		"streak_start_date": streak_start_date,
		"total_active_days": total_active_days,
		"total_activities": int(record.get("total_activities") or 0) + 1,
		"streak_action": action,
	})
	return record
