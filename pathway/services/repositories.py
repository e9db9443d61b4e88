"""
Repositories - Frappe-backed loaders for the progression engine.

Each loader reads one kind of data and returns plain dicts shaped the way
the engine expects. No rules are applied here beyond scoping filters.

Loaders:
- get_learning_path(): Active path of an organization with its items
- get_completion_states(): Completion state per content for a user
- get_points_entries(): Ledger entries for a set of users and a period
- get_streak_records(): Daily streak records for a set of users
- get_organization_members(): Active members of an organization or team
- get_active_membership(): Requesting user's organization membership
"""

import frappe
from frappe.utils import cint

from pathway.services.progression_engine import points_ledger
from pathway.services.progression_engine.constants import PERIOD_WEEKLY, STREAK_TYPE_DAILY

LEARNING_PATH_DOCTYPE = "Learning Path"
CONTENT_COMPLETION_DOCTYPE = "Content Completion"
POINTS_LEDGER_DOCTYPE = "Points Ledger Entry"
USER_STREAK_DOCTYPE = "User Streak"
MEMBERSHIP_DOCTYPE = "Pathway Membership"

COMPLETION_FIELDS = [
	"content_id",
	"video_progress_percent",
	"worksheet_submitted",
	"checkin_status",
	"bold_action_status",
]
LEDGER_FIELDS = ["user", "points", "reason", "content_id", "source_type", "earned_at", "period_week"]
STREAK_FIELDS = [
	"user",
	"streak_type",
	"current_streak",
	"longest_streak",
	"last_activity_date",
	"streak_start_date",
	"total_active_days",
	"total_activities",
]


def get_learning_path(organization_id):
	"""
	Get the active learning path of an organization.

	Args:
		organization_id (str): Organization identifier

	Returns:
		dict | None: Path configuration with "items", or None when the
		organization has no active path
	"""
	path_name = frappe.db.get_value(
		LEARNING_PATH_DOCTYPE,
		{"organization": organization_id, "is_active": 1},
		"name",
	)
	if not path_name:
		return None

	doc = frappe.get_doc(LEARNING_PATH_DOCTYPE, path_name)

	return {
		"name": doc.name,
		"organization": doc.organization,
		"path_name": doc.path_name,
		"unlock_mode": doc.unlock_mode,
		"completion_requirement": doc.completion_requirement,
		"enrollment_date": doc.enrollment_date,
		"unlock_interval_days": cint(doc.unlock_interval_days),
		"is_active": bool(doc.is_active),
		"items": [
			{
				"content_id": row.content_id,
				"sequence_order": cint(row.sequence_order),
				"unlock_date": row.unlock_date,
				"is_optional": bool(row.is_optional),
				"is_manually_unlocked": bool(row.is_manually_unlocked),
			}
			for row in doc.items
		],
	}


def get_completion_states(user_id, content_ids):
	"""
	Get a user's completion state for each content item.

	Args:
		user_id (str): User identifier
		content_ids (list): Content identifiers

	Returns:
		dict: content_id -> completion state (content without a row is absent)
	"""
	content_ids = list(content_ids)
	if not content_ids:
		return {}

	rows = frappe.get_all(
		CONTENT_COMPLETION_DOCTYPE,
		filters={"user": user_id, "content_id": ["in", content_ids]},
		fields=COMPLETION_FIELDS,
	)

	return {
		row.content_id: {
			"video_progress_percent": row.video_progress_percent or 0,
			"worksheet_submitted": bool(row.worksheet_submitted),
			"checkin_status": row.checkin_status or "none",
			"bold_action_status": row.bold_action_status or "none",
		}
		for row in rows
	}


def get_points_entries(user_ids, period, today):
	"""
	Get ledger entries for a set of users within a period.

	Weekly filtering uses the stored period_week, which was computed with the
	same week_start() used here.

	Args:
		user_ids (list): Users to include
		period (str): 'weekly' or 'all_time'
		today (date): Reference date for the current week

	Returns:
		list: Ledger entries, newest first
	"""
	user_ids = list(user_ids)
	points_ledger.validate_period(period)
	if not user_ids:
		return []

	filters = {"user": ["in", user_ids]}
	if period == PERIOD_WEEKLY:
		filters["period_week"] = points_ledger.week_start(today)

	return frappe.get_all(
		POINTS_LEDGER_DOCTYPE,
		filters=filters,
		fields=LEDGER_FIELDS,
		order_by="earned_at desc",
	)


def get_streak_records(user_ids):
	"""
	Get daily streak records for a set of users.

	Returns:
		dict: user -> streak record (users without a record are absent)
	"""
	user_ids = list(user_ids)
	if not user_ids:
		return {}

	rows = frappe.get_all(
		USER_STREAK_DOCTYPE,
		filters={"user": ["in", user_ids], "streak_type": STREAK_TYPE_DAILY},
		fields=STREAK_FIELDS,
	)
	return {row.user: dict(row) for row in rows}


def get_organization_members(organization_id, team_id=None):
	"""
	Get active members of an organization, optionally narrowed to a team.

	Args:
		organization_id (str): Organization identifier
		team_id (str): Team identifier, or None for the whole organization

	Returns:
		list: Members as {"user_id", "full_name"}
	"""
	filters = {"organization": organization_id, "is_active": 1}
	if team_id:
		filters["team"] = team_id

	user_ids = frappe.get_all(MEMBERSHIP_DOCTYPE, filters=filters, pluck="user", distinct=True)
	if not user_ids:
		return []

	names = dict(
		frappe.get_all("User", filters={"name": ["in", user_ids]}, fields=["name", "full_name"], as_list=True)
	)

	return [{"user_id": user_id, "full_name": names.get(user_id)} for user_id in user_ids]


def get_active_membership(user_id):
	"""
	Get a user's active membership.

	Returns:
		frappe._dict | None: name, organization, team and role
	"""
	return frappe.db.get_value(
		MEMBERSHIP_DOCTYPE,
		{"user": user_id, "is_active": 1},
		["name", "organization", "team", "role"],
		as_dict=True,
		order_by="creation asc",
	)


def get_user_organizations(user_id):
	"""Get the organizations a user is an active member of."""
	return frappe.get_all(
		MEMBERSHIP_DOCTYPE,
		filters={"user": user_id, "is_active": 1},
		pluck="organization",
		distinct=True,
	)


def get_user_points_entries(user_id):
	"""Get all ledger entries of one user, newest first."""
	return frappe.get_all(
		POINTS_LEDGER_DOCTYPE,
		filters={"user": user_id},
		fields=LEDGER_FIELDS,
		order_by="earned_at desc",
	)
