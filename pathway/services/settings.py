"""
Pathway Settings access.

Reads the Pathway Settings single DocType and fills unset values with
defaults, so a fresh site awards the standard points and ranks the top 10.

Settings:
- points_video_complete / points_worksheet_complete /
  points_checkin_complete / points_bold_action_complete: points per reason
- leaderboard_size: number of top entries returned by the leaderboard
- cache_ttl_seconds: lifetime of cached progression data slices
"""

import frappe
from frappe.utils import cint

from pathway.services.progression_engine.constants import DEFAULT_LEADERBOARD_SIZE, DEFAULT_POINTS

SETTINGS_DOCTYPE = "Pathway Settings"
DEFAULT_CACHE_TTL_SECONDS = 300


def get_settings():
	"""
	Get effective Pathway settings.

	Returns:
		dict: points (reason -> points), leaderboard_size, cache_ttl_seconds
	"""
	stored = frappe.db.get_singles_dict(SETTINGS_DOCTYPE) or {}

	points = {}
	for reason, default in DEFAULT_POINTS.items():
		value = cint(stored.get(f"points_{reason}"))
		points[reason] = value if value > 0 else default

	leaderboard_size = cint(stored.get("leaderboard_size"))
	cache_ttl_seconds = cint(stored.get("cache_ttl_seconds"))

	return {
		"points": points,
		"leaderboard_size": leaderboard_size if leaderboard_size > 0 else DEFAULT_LEADERBOARD_SIZE,
		"cache_ttl_seconds": cache_ttl_seconds if cache_ttl_seconds > 0 else DEFAULT_CACHE_TTL_SECONDS,
	}


def get_points_for_reason(reason):
	"""
	Get configured points for a point-earning reason.

	Raises:
		frappe.ValidationError: If the reason is unknown
	"""
	points = get_settings()["points"]
	if reason not in points:
		frappe.throw(f"Unknown points reason: {reason}", exc=frappe.ValidationError)
	return points[reason]
