"""
Progress and gamification DocType definitions for Pathway.

These hold per-user learning state: completion of content, the append-only
points ledger and daily streaks.
"""

from pathway.services.progression_engine.constants import STREAK_TYPE_DAILY
from pathway.services.schema.constants import (
	BOLD_ACTION_STATUS_OPTIONS,
	CHECKIN_STATUS_OPTIONS,
	MODULE,
	READ_CREATE_PERMISSIONS,
	SYSTEM_MANAGER_PERMISSIONS,
)


def get_content_completion():
	"""Four-step completion state of one content item for one user."""
	return {
		"doctype": "DocType",
		"name": "Content Completion",
		"module": MODULE,
		"custom": 0,
		"autoname": "hash",
		"fields": [
			{
				"fieldname": "user",
				"fieldtype": "Link",
				"label": "User",
				"options": "User",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "content_id",
				"fieldtype": "Data",
				"label": "Content ID",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "video_progress_percent",
				"fieldtype": "Float",
				"label": "Video Progress (%)",
				"default": 0,
			},
			{
				"fieldname": "worksheet_submitted",
				"fieldtype": "Check",
				"label": "Worksheet Submitted",
				"default": 0,
			},
			{
				"fieldname": "checkin_status",
				"fieldtype": "Select",
				"label": "Check-in Status",
				"options": CHECKIN_STATUS_OPTIONS,
				"default": "none",
			},
			{
				"fieldname": "bold_action_status",
				"fieldtype": "Select",
				"label": "Bold Action Status",
				"options": BOLD_ACTION_STATUS_OPTIONS,
				"default": "none",
			},
			{
				"fieldname": "bold_action_signed_off_by",
				"fieldtype": "Link",
				"label": "Bold Action Signed Off By",
				"options": "User",
			},
		],
		"permissions": SYSTEM_MANAGER_PERMISSIONS,
	}


def get_points_ledger_entry():
	"""Append-only points award, named by its idempotency key."""
	return {
		"doctype": "DocType",
		"name": "Points Ledger Entry",
		"module": MODULE,
		"custom": 0,
		"autoname": "field:idempotency_key",
		"fields": [
			{
				"fieldname": "idempotency_key",
				"fieldtype": "Data",
				"label": "Idempotency Key",
				"reqd": 1,
				"unique": 1,
				"read_only": 1,
			},
			{
				"fieldname": "user",
				"fieldtype": "Link",
				"label": "User",
				"options": "User",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "points",
				"fieldtype": "Int",
				"label": "Points",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "reason",
				"fieldtype": "Data",
				"label": "Reason",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "content_id",
				"fieldtype": "Data",
				"label": "Content ID",
			},
			{
				"fieldname": "source_type",
				"fieldtype": "Data",
				"label": "Source Type",
				"default": "content",
			},
			{
				"fieldname": "earned_at",
				"fieldtype": "Datetime",
				"label": "Earned At",
				"reqd": 1,
			},
			{
				"fieldname": "period_week",
				"fieldtype": "Date",
				"label": "Period Week",
				"search_index": 1,
			},
		],
		"permissions": READ_CREATE_PERMISSIONS,
	}


def get_user_streak():
	"""Daily activity streak of a user."""
	return {
		"doctype": "DocType",
		"name": "User Streak",
		"module": MODULE,
		"custom": 0,
		"autoname": "hash",
		"fields": [
			{
				"fieldname": "user",
				"fieldtype": "Link",
				"label": "User",
				"options": "User",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "streak_type",
				"fieldtype": "Data",
				"label": "Streak Type",
				"default": STREAK_TYPE_DAILY,
				"reqd": 1,
			},
			{
				"fieldname": "current_streak",
				"fieldtype": "Int",
				"label": "Current Streak",
				"default": 0,
				"in_list_view": 1,
			},
			{
				"fieldname": "longest_streak",
				"fieldtype": "Int",
				"label": "Longest Streak",
				"default": 0,
			},
			{
				"fieldname": "last_activity_date",
				"fieldtype": "Date",
				"label": "Last Activity Date",
			},
			{
				"fieldname": "streak_start_date",
				"fieldtype": "Date",
				"label": "Streak Start Date",
			},
			{
				"fieldname": "total_active_days",
				"fieldtype": "Int",
				"label": "Total Active Days",
				"default": 0,
			},
			{
				"fieldname": "total_activities",
				"fieldtype": "Int",
				"label": "Total Activities",
				"default": 0,
			},
		],
		"permissions": SYSTEM_MANAGER_PERMISSIONS,
	}


# Export all progress DocType definitions
PROGRESS_DOCTYPE_DEFINITIONS = [
	get_content_completion(),
	get_points_ledger_entry(),
	get_user_streak(),
]
