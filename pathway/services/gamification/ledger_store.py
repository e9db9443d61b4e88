"""
Ledger Store - Points Ledger Entry persistence for the points awarder.

Entries are named by their idempotency key, so the primary key itself
rejects a second entry for the same (user, content, reason).
"""

from datetime import timezone

import frappe

POINTS_LEDGER_DOCTYPE = "Points Ledger Entry"


class FrappePointsLedger:
	"""Ledger store backed by the Points Ledger Entry DocType."""

	def exists(self, idempotency_key):
		return bool(frappe.db.exists(POINTS_LEDGER_DOCTYPE, idempotency_key))

	def insert(self, entry):
		"""
		Insert a ledger entry.

		Returns:
			bool: True if inserted, False if an entry with the same key exists
		"""
		values = dict(entry)
		earned_at = values.get("earned_at")
		if earned_at is not None and getattr(earned_at, "tzinfo", None) is not None:
			# Datetime columns are naive and hold UTC
			values["earned_at"] = earned_at.astimezone(timezone.utc).replace(tzinfo=None)

		try:
			frappe.get_doc({"doctype": POINTS_LEDGER_DOCTYPE, **values}).insert(ignore_permissions=True)
		except (frappe.DuplicateEntryError, frappe.UniqueValidationError):
			frappe.logger().info(f"Duplicate ledger entry rejected: {entry.get('idempotency_key')}")
			return False
		return True
