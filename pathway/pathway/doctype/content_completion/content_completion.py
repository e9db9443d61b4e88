# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

"""
Content Completion DocType

Four-step completion state of one content item for one user: video
watched, worksheet submitted, check-in, bold action. Points and streaks are
awarded from the document events registered in hooks.py.
"""

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import flt

from pathway.services.progression_engine.constants import BOLD_ACTION_STATUSES, CHECKIN_STATUSES


class ContentCompletion(Document):
	def validate(self):
		self.validate_video_progress()
		self.validate_statuses()
		self.validate_unique_user_content()

	def validate_video_progress(self):
		progress = flt(self.video_progress_percent)
		if progress < 0 or progress > 100:
			frappe.throw(_("Video progress must be between 0 and 100"), exc=frappe.ValidationError)

	def validate_statuses(self):
		if not self.checkin_status:
			self.checkin_status = "none"
		if not self.bold_action_status:
			self.bold_action_status = "none"

		if self.checkin_status not in CHECKIN_STATUSES:
			frappe.throw(_("Invalid check-in status: {0}").format(self.checkin_status), exc=frappe.ValidationError)
		if self.bold_action_status not in BOLD_ACTION_STATUSES:
			frappe.throw(
				_("Invalid bold action status: {0}").format(self.bold_action_status),
				exc=frappe.ValidationError,
			)

	def validate_unique_user_content(self):
		duplicate = frappe.db.exists(
			"Content Completion",
			{"user": self.user, "content_id": self.content_id, "name": ["!=", self.name]},
		)
		if duplicate:
			frappe.throw(
				_("Completion for {0} on {1} already exists").format(self.user, self.content_id),
				exc=frappe.ValidationError,
			)
