"""
Learning Path administration API.

Endpoints (admin and owner roles only):
- get_learning_path: The organization's active path with its items
- save_learning_path: Create or update the path, optionally replacing its items
- set_item_unlock: Unlock or re-lock one item of a manual-mode path

Saving goes through the Learning Path controller, which validates the
configuration and drops the organization's cached progression data.
"""

import frappe
from frappe import _
from frappe.utils import cint, now_datetime

from pathway.api.utils import ADMIN_ROLES, get_membership, get_session_user, parse_list, require_role
from pathway.services import repositories
from pathway.services.progression_engine.constants import UNLOCK_MANUAL

PATH_FIELDS = (
	"path_name",
	"description",
	"unlock_mode",
	"completion_requirement",
	"enrollment_date",
	"unlock_interval_days",
)


def _get_admin_membership():
	user = get_session_user()
	membership = get_membership(user)
	require_role(membership, ADMIN_ROLES)
	return user, membership


def _get_active_path_doc(organization_id):
	name = frappe.db.get_value(
		repositories.LEARNING_PATH_DOCTYPE,
		{"organization": organization_id, "is_active": 1},
		"name",
	)
	if not name:
		return None
	return frappe.get_doc(repositories.LEARNING_PATH_DOCTYPE, name)


@frappe.whitelist()
def get_learning_path():
	"""
	Get the organization's active learning path.

	Returns:
		dict: {"learning_path": path with items, or None}
	"""
	_user, membership = _get_admin_membership()
	return {"learning_path": repositories.get_learning_path(membership.organization)}


@frappe.whitelist(methods=["POST"])
def save_learning_path(
	path_name=None,
	description=None,
	unlock_mode=None,
	completion_requirement=None,
	enrollment_date=None,
	unlock_interval_days=None,
	items=None,
):
	"""
	Create or update the organization's active learning path.

	Values left empty keep their current value on an existing path and take
	the controller defaults on a new one.

	Args:
		items: Optional list of {"content_id", "unlock_date", "is_optional"}.
			When given, it replaces the path's items; sequence_order follows
			list position starting at 1, and in manual mode the first item
			starts unlocked.

	Returns:
		dict: {"learning_path": saved path with items, "created": bool}
	"""
	_user, membership = _get_admin_membership()

	doc = _get_active_path_doc(membership.organization)
	created = doc is None
	if created:
		doc = frappe.new_doc(repositories.LEARNING_PATH_DOCTYPE)
		doc.organization = membership.organization
		doc.is_active = 1

	values = {
		"path_name": path_name,
		"description": description,
		"unlock_mode": unlock_mode,
		"completion_requirement": completion_requirement,
		"enrollment_date": enrollment_date,
		"unlock_interval_days": unlock_interval_days,
	}
	for field in PATH_FIELDS:
		if values[field] not in (None, ""):
			doc.set(field, cint(values[field]) if field == "unlock_interval_days" else values[field])

	if items is not None:
		_replace_items(doc, parse_list(items))

	# Membership roles are checked above; desk permissions do not apply
	doc.save(ignore_permissions=True)

	frappe.logger().info(
		f"Learning path {'created' if created else 'updated'} for organization {membership.organization}: "
		f"{doc.name} ({len(doc.items)} items)"
	)

	return {
		"learning_path": repositories.get_learning_path(membership.organization),
		"created": created,
	}


def _replace_items(doc, items):
	doc.set("items", [])
	for index, item in enumerate(items):
		if not isinstance(item, dict) or not item.get("content_id"):
			frappe.throw(_("Each item requires a content_id"), exc=frappe.ValidationError)
		doc.append("items", {
			"content_id": item["content_id"],
			"sequence_order": index + 1,
			"unlock_date": item.get("unlock_date") or None,
			"is_optional": cint(item.get("is_optional")),
			"is_manually_unlocked": 1 if doc.unlock_mode == UNLOCK_MANUAL and index == 0 else 0,
		})


@frappe.whitelist(methods=["POST"])
def set_item_unlock(content_id, unlock=1):
	"""
	Unlock or re-lock an item of a manual-mode path.

	Args:
		content_id: Content identifier of the item
		unlock: 1 to unlock, 0 to lock again

	Returns:
		dict: content_id, is_manually_unlocked, manually_unlocked_at, manually_unlocked_by

	Raises:
		frappe.ValidationError: If there is no active path, the path is not in
			manual mode, the item is missing, or the first item would be locked
	"""
	user, membership = _get_admin_membership()
	unlock = cint(unlock)

	doc = _get_active_path_doc(membership.organization)
	if not doc:
		frappe.throw(_("Learning path not found"), exc=frappe.ValidationError)

	if doc.unlock_mode != UNLOCK_MANUAL:
		frappe.throw(_("Manual unlock is only available in manual unlock mode"), exc=frappe.ValidationError)

	rows = sorted(doc.items, key=lambda row: cint(row.sequence_order))
	row = next((r for r in rows if r.content_id == content_id), None)
	if not row:
		frappe.throw(_("Item not found"), exc=frappe.ValidationError)

	if not unlock and row is rows[0]:
		frappe.throw(_("Cannot lock the first module"), exc=frappe.ValidationError)

	row.is_manually_unlocked = 1 if unlock else 0
	row.manually_unlocked_at = now_datetime() if unlock else None
	row.manually_unlocked_by = user if unlock else None
	# Membership roles are checked above; desk permissions do not apply
	doc.save(ignore_permissions=True)

	return {
		"content_id": row.content_id,
		"is_manually_unlocked": bool(row.is_manually_unlocked),
		"manually_unlocked_at": row.manually_unlocked_at,
		"manually_unlocked_by": row.manually_unlocked_by,
	}
