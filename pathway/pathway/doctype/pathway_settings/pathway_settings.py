# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import cint

from pathway.services import progress_cache
from pathway.services.progression_engine.constants import DEFAULT_POINTS


class PathwaySettings(Document):
	def validate(self):
		self.validate_points()
		self.validate_non_negative("leaderboard_size", _("Leaderboard Size"))
		self.validate_non_negative("cache_ttl_seconds", _("Cache TTL"))

	def validate_points(self):
		"""Zero leaves the default in place; negative values are rejected."""
		for reason in DEFAULT_POINTS:
			self.validate_non_negative(f"points_{reason}", _("Points for {0}").format(reason))

	def validate_non_negative(self, fieldname, label):
		value = self.get(fieldname)
		if cint(value) < 0:
			frappe.throw(_("{0} cannot be negative").format(label), exc=frappe.ValidationError)

	def on_update(self):
		"""Drop all cached progression data; TTLs and leaderboard sizes changed."""
		progress_cache.invalidate_after_commit(progress_cache.invalidate_all)
