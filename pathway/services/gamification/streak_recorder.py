"""
Streak Recorder Service

Applies a qualifying learning activity to the user's daily User Streak
record. This is the only writer of streak records; leaderboards and
dashboards read them through the streak tracker.

Streak Logic (server UTC date):
- First activity: 0 -> 1
- Same day: no change
- Next day (consecutive): N -> N+1
- Gap > 1 day: reset to 1 (not 0)
"""

import frappe

from pathway.services.progression_engine import streak_tracker
from pathway.services.progression_engine.constants import STREAK_TYPE_DAILY

USER_STREAK_DOCTYPE = "User Streak"
RECORD_FIELDS = (
	"current_streak",
	"longest_streak",
	"last_activity_date",
	"streak_start_date",
	"total_active_days",
	"total_activities",
)


def record_activity(user_id, today, streak_type=STREAK_TYPE_DAILY):
	"""
	Record a qualifying activity for a user's streak.

	The streak row is locked for update so concurrent completions by the
	same user are applied one after the other.

	Args:
	    user_id (str): Frappe User.name
	    today (date): Date of the activity (UTC)
	    streak_type (str): Streak type, daily by default

	Returns:
	    dict: old_streak, new_streak, streak_action, last_activity_date
	"""
	name = frappe.db.get_value(USER_STREAK_DOCTYPE, {"user": user_id, "streak_type": streak_type}, "name")

	if name:
		doc = frappe.get_doc(USER_STREAK_DOCTYPE, name, for_update=True)
		record = {field: doc.get(field) for field in RECORD_FIELDS}
	else:
		doc = frappe.new_doc(USER_STREAK_DOCTYPE)
		doc.user = user_id
		doc.streak_type = streak_type
		record = None

	old_streak = (record or {}).get("current_streak") or 0
	updated = streak_tracker.apply_activity(record, today)

	for field in RECORD_FIELDS:
		doc.set(field, updated[field])
	doc.save(ignore_permissions=True)

	frappe.logger().info(
		f"Streak {updated['streak_action']} for {user_id}: {old_streak} -> {updated['current_streak']}"
	)

	return {
		"old_streak": old_streak,
		"new_streak": updated["current_streak"],
		"streak_action": updated["streak_action"],
		"last_activity_date": updated["last_activity_date"],
	}
