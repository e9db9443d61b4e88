"""
Shared utility functions for the Pathway API.

Session and membership resolution used by every endpoint, so each domain
module only deals with its own request parameters.
"""

import frappe
from frappe import _

from pathway.services import repositories

ADMIN_ROLES = ("admin", "owner")


def get_session_user():
	"""
	Get the logged-in user.

	Raises:
		frappe.ValidationError: If the request is not authenticated
	"""
	user = frappe.session.user
	if not user or user == "Guest":
		frappe.throw(_("User must be logged in"), exc=frappe.ValidationError)
	return user


def get_membership(user):
	"""
	Get the user's active organization membership.

	Raises:
		frappe.ValidationError: If the user has no active membership
	"""
	membership = repositories.get_active_membership(user)
	if not membership:
		frappe.throw(_("User not associated with an organization"), exc=frappe.ValidationError)
	return membership


def require_role(membership, roles):
	"""
	Ensure the membership carries one of the given roles.

	Raises:
		frappe.PermissionError: If the role is not allowed
	"""
	if membership.role not in roles:
		frappe.throw(_("Insufficient role for this action"), exc=frappe.PermissionError)


def parse_list(value):
	"""Accept a list or a JSON-encoded list from request parameters."""
	if value is None:
		return []
	if isinstance(value, str):
		value = frappe.parse_json(value)
	if not isinstance(value, (list, tuple)):
		frappe.throw(_("Expected a list"), exc=frappe.ValidationError)
	return list(value)


def run_engine(func, *args, **kwargs):
	"""
	Call an engine-backed service, turning contract violations into validation errors.

	Raises:
		frappe.ValidationError: If the engine rejects its input
	"""
	try:
		return func(*args, **kwargs)
	except ValueError as e:
		frappe.throw(_(str(e)), exc=frappe.ValidationError)
