"""
Sequence API - learning path progress and content access.

Endpoints:
- get_sequence: The learner's path with unlock and completion state per module
- get_content_access: Whether specific content items are open to the learner

Both go through the same progression service so a page render and an API
call can never disagree on what is unlocked.
"""

import frappe
from typing import Any, Dict

from pathway.api.utils import get_membership, get_session_user, parse_list, run_engine
from pathway.services import progression


@frappe.whitelist()
def get_sequence() -> Dict[str, Any]:
	"""Get the current user's content sequence with unlock status.

	Returns:
		Dictionary with keys:
			- has_sequence: bool - False when the organization has no active path
			- path_name, unlock_mode, completion_requirement
			- items: list - content_id, sequence_order, is_optional, is_unlocked,
			  is_complete, unlock_date, unlock_reason, lock_cause,
			  progress_percent, completed_steps
			- summary: dict - totals, completion_percentage, next_content_id

	Raises:
		frappe.ValidationError: If the user is not logged in, has no
			membership, or the path configuration is invalid
	"""
	user = get_session_user()
	membership = get_membership(user)

	return run_engine(progression.evaluate_sequence, membership.organization, user)


@frappe.whitelist()
def get_content_access(content_ids) -> Dict[str, Dict[str, Any]]:
	"""Check access to a list of content items.

	Args:
		content_ids: List (or JSON list) of content identifiers

	Returns:
		Mapping of content_id to is_unlocked, unlock_reason and in_sequence
	"""
	user = get_session_user()
	membership = get_membership(user)
	content_ids = parse_list(content_ids)

	return run_engine(progression.get_content_access, membership.organization, user, content_ids)
