# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

"""
Points Ledger Entry DocType

Append-only record of a points award. Named by its idempotency key
({user}:{content}:{reason}), so the same award can never be stored twice.
"""

from datetime import datetime, timezone

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import cint, get_datetime

from pathway.services.gamification.points_awarder import build_idempotency_key
from pathway.services.progression_engine.points_ledger import week_start


class PointsLedgerEntry(Document):
	def before_insert(self):
		if not self.earned_at:
			# Stored naive in UTC so period_week is the UTC Monday
			self.earned_at = datetime.now(timezone.utc).replace(tzinfo=None)
		if not self.idempotency_key:
			self.idempotency_key = build_idempotency_key(self.user, self.content_id, self.reason)
		self.period_week = week_start(get_datetime(self.earned_at))

	def validate(self):
		if cint(self.points) <= 0:
			frappe.throw(_("Points must be positive"), exc=frappe.ValidationError)
		if not self.flags.in_insert:
			frappe.throw(_("Points ledger entries cannot be modified"), exc=frappe.ValidationError)

	def on_trash(self):
		frappe.throw(_("Points ledger entries cannot be deleted"), exc=frappe.ValidationError)
