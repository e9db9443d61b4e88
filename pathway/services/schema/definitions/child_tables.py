"""
Child table DocType definitions for Pathway.

These must be created before parent DocTypes that reference them.
"""

from pathway.services.schema.constants import MODULE


def get_learning_path_item():
	"""Ordered content item of a learning path with its unlock metadata."""
	return {
		"doctype": "DocType",
		"name": "Learning Path Item",
		"module": MODULE,
		"custom": 0,
		"is_table": 1,
		"istable": 1,
		"fields": [
			{
				"fieldname": "content_id",
				"fieldtype": "Data",
				"label": "Content ID",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "sequence_order",
				"fieldtype": "Int",
				"label": "Sequence Order",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "unlock_date",
				"fieldtype": "Date",
				"label": "Unlock Date",
				"in_list_view": 1,
			},
			{
				"fieldname": "is_optional",
				"fieldtype": "Check",
				"label": "Is Optional",
				"default": 0,
			},
			{
				"fieldname": "is_manually_unlocked",
				"fieldtype": "Check",
				"label": "Is Manually Unlocked",
				"default": 0,
				"in_list_view": 1,
			},
			{
				"fieldname": "manually_unlocked_at",
				"fieldtype": "Datetime",
				"label": "Manually Unlocked At",
				"read_only": 1,
			},
			{
				"fieldname": "manually_unlocked_by",
				"fieldtype": "Link",
				"label": "Manually Unlocked By",
				"options": "User",
				"read_only": 1,
			},
		],
		"permissions": [],
	}


# Export all child table definitions
CHILD_TABLE_DEFINITIONS = [
	get_learning_path_item(),
]
