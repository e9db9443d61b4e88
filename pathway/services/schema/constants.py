"""
Constants for Pathway DocType schema creation
"""

from pathway.services.progression_engine.constants import (
	BOLD_ACTION_STATUSES,
	CHECKIN_STATUSES,
	COMPLETION_REQUIREMENTS,
	UNLOCK_MODES,
)

MODULE = "Pathway"

UNLOCK_MODE_OPTIONS = "\n".join(UNLOCK_MODES)
COMPLETION_REQUIREMENT_OPTIONS = "\n".join(COMPLETION_REQUIREMENTS)
CHECKIN_STATUS_OPTIONS = "\n".join(CHECKIN_STATUSES)
BOLD_ACTION_STATUS_OPTIONS = "\n".join(BOLD_ACTION_STATUSES)
MEMBERSHIP_ROLES = ("member", "leader", "admin", "owner")
MEMBERSHIP_ROLE_OPTIONS = "\n".join(MEMBERSHIP_ROLES)

# Full access for System Manager on every Pathway DocType
SYSTEM_MANAGER_PERMISSIONS = [
	{
		"role": "System Manager",
		"permlevel": 0,
		"read": 1,
		"write": 1,
		"create": 1,
		"delete": 1,
		"submit": 0,
		"cancel": 0,
	},
]

# Ledger rows are append-only: no write or delete from the desk
READ_CREATE_PERMISSIONS = [
	{
		"role": "System Manager",
		"permlevel": 0,
		"read": 1,
		"write": 0,
		"create": 1,
		"delete": 0,
		"submit": 0,
		"cancel": 0,
	},
]
