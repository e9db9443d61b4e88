# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import cint


class UserStreak(Document):
	def validate(self):
		self.validate_non_negative()
		self.validate_longest_streak()

	def validate_non_negative(self):
		for field in ("current_streak", "longest_streak", "total_active_days", "total_activities"):
			if cint(self.get(field)) < 0:
				frappe.throw(_("{0} cannot be negative").format(self.meta.get_label(field)), exc=frappe.ValidationError)

	def validate_longest_streak(self):
		if cint(self.longest_streak) < cint(self.current_streak):
			self.longest_streak = self.current_streak
