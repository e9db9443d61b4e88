"""
Organization membership and settings DocType definitions for Pathway.
"""

from pathway.services.progression_engine.constants import DEFAULT_LEADERBOARD_SIZE, DEFAULT_POINTS
from pathway.services.schema.constants import (
	MEMBERSHIP_ROLE_OPTIONS,
	MODULE,
	SYSTEM_MANAGER_PERMISSIONS,
)
from pathway.services.settings import DEFAULT_CACHE_TTL_SECONDS


def get_pathway_membership():
	"""A user's membership of an organization and optional team."""
	return {
		"doctype": "DocType",
		"name": "Pathway Membership",
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
				"fieldname": "organization",
				"fieldtype": "Data",
				"label": "Organization",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "team",
				"fieldtype": "Data",
				"label": "Team",
				"search_index": 1,
			},
			{
				"fieldname": "role",
				"fieldtype": "Select",
				"label": "Role",
				"options": MEMBERSHIP_ROLE_OPTIONS,
				"default": "member",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "is_active",
				"fieldtype": "Check",
				"label": "Is Active",
				"default": 1,
			},
		],
		"permissions": SYSTEM_MANAGER_PERMISSIONS,
	}


def get_pathway_settings():
	"""Points per reason, leaderboard size and cache lifetime."""
	points_fields = [
		{
			"fieldname": f"points_{reason}",
			"fieldtype": "Int",
			"label": f"Points: {reason.replace('_', ' ').title()}",
			"default": points,
		}
		for reason, points in DEFAULT_POINTS.items()
	]

	return {
		"doctype": "DocType",
		"name": "Pathway Settings",
		"module": MODULE,
		"custom": 0,
		"issingle": 1,
		"fields": [
			*points_fields,
			{
				"fieldname": "leaderboard_size",
				"fieldtype": "Int",
				"label": "Leaderboard Size",
				"default": DEFAULT_LEADERBOARD_SIZE,
			},
			{
				"fieldname": "cache_ttl_seconds",
				"fieldtype": "Int",
				"label": "Cache TTL (seconds)",
				"default": DEFAULT_CACHE_TTL_SECONDS,
			},
		],
		"permissions": SYSTEM_MANAGER_PERMISSIONS,
	}


# Export all organization DocType definitions
ORGANIZATION_DOCTYPE_DEFINITIONS = [
	get_pathway_membership(),
	get_pathway_settings(),
]
