# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document

from pathway.services import progress_cache
from pathway.services.schema.constants import MEMBERSHIP_ROLES


class PathwayMembership(Document):
	def validate(self):
		if not self.role:
			self.role = "member"
		if self.role not in MEMBERSHIP_ROLES:
			frappe.throw(_("Invalid role: {0}").format(self.role), exc=frappe.ValidationError)

	def on_update(self):
		"""Member lists are cached per organization."""
		progress_cache.invalidate_after_commit(progress_cache.invalidate_organization, self.organization)

	def on_trash(self):
		progress_cache.invalidate_after_commit(progress_cache.invalidate_organization, self.organization)
