"""
Learning path DocType definitions for Pathway.

One active path per organization orders its content and decides how each
item unlocks.
"""

from pathway.services.progression_engine.constants import REQUIRE_FULL, UNLOCK_HYBRID
from pathway.services.schema.constants import (
	COMPLETION_REQUIREMENT_OPTIONS,
	MODULE,
	SYSTEM_MANAGER_PERMISSIONS,
	UNLOCK_MODE_OPTIONS,
)


def get_learning_path():
	"""Organization learning path with unlock configuration and items."""
	return {
		"doctype": "DocType",
		"name": "Learning Path",
		"module": MODULE,
		"custom": 0,
		"autoname": "hash",
		"title_field": "path_name",
		"fields": [
			{
				"fieldname": "organization",
				"fieldtype": "Data",
				"label": "Organization",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "path_name",
				"fieldtype": "Data",
				"label": "Path Name",
				"in_list_view": 1,
			},
			{
				"fieldname": "description",
				"fieldtype": "Small Text",
				"label": "Description",
			},
			{
				"fieldname": "unlock_mode",
				"fieldtype": "Select",
				"label": "Unlock Mode",
				"options": UNLOCK_MODE_OPTIONS,
				"default": UNLOCK_HYBRID,
				"reqd": 1,
			},
			{
				"fieldname": "completion_requirement",
				"fieldtype": "Select",
				"label": "Completion Requirement",
				"options": COMPLETION_REQUIREMENT_OPTIONS,
				"default": REQUIRE_FULL,
				"reqd": 1,
			},
			{
				"fieldname": "enrollment_date",
				"fieldtype": "Date",
				"label": "Enrollment Date",
			},
			{
				"fieldname": "unlock_interval_days",
				"fieldtype": "Int",
				"label": "Unlock Interval (days)",
				"default": 7,
			},
			{
				"fieldname": "is_active",
				"fieldtype": "Check",
				"label": "Is Active",
				"default": 1,
				"search_index": 1,
			},
			{
				"fieldname": "items",
				"fieldtype": "Table",
				"label": "Items",
				"options": "Learning Path Item",
			},
		],
		"permissions": SYSTEM_MANAGER_PERMISSIONS,
	}


# Export all learning path DocType definitions
PATH_DOCTYPE_DEFINITIONS = [
	get_learning_path(),
]
