# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

"""
Learning Path DocType

An organization's ordered content sequence and its unlock configuration.

Key Features:
- Defaults for new paths (hybrid mode, full completion, 7-day interval,
  enrollment today)
- Configuration validated with the same rules the unlock evaluator applies
- Unique sequence_order across items
- At most one active path per organization
- Cached progression data of the organization dropped on change
"""

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import cint, today

from pathway.services import progress_cache
from pathway.services.progression_engine.constants import REQUIRE_FULL, UNLOCK_HYBRID
from pathway.services.progression_engine.unlock_evaluator import validate_path_config

DEFAULT_PATH_NAME = "Learning Path"
DEFAULT_UNLOCK_INTERVAL_DAYS = 7


class LearningPath(Document):
	def before_insert(self):
		self.set_defaults()

	def validate(self):
		self.validate_configuration()
		self.validate_unique_sequence_order()
		self.validate_single_active_path()

	def set_defaults(self):
		if not self.path_name:
			self.path_name = DEFAULT_PATH_NAME
		if not self.unlock_mode:
			self.unlock_mode = UNLOCK_HYBRID
		if not self.completion_requirement:
			self.completion_requirement = REQUIRE_FULL
		if self.unlock_interval_days is None:
			self.unlock_interval_days = DEFAULT_UNLOCK_INTERVAL_DAYS
		if not self.enrollment_date:
			self.enrollment_date = today()

	def validate_configuration(self):
		try:
			validate_path_config({
				"unlock_mode": self.unlock_mode,
				"completion_requirement": self.completion_requirement,
				"enrollment_date": self.enrollment_date,
				"unlock_interval_days": cint(self.unlock_interval_days),
			})
		except (ValueError, TypeError) as e:
			frappe.throw(_(str(e)), exc=frappe.ValidationError)

	def validate_unique_sequence_order(self):
		seen = set()
		for row in self.items:
			order = cint(row.sequence_order)
			if order in seen:
				frappe.throw(
					_("Sequence order {0} is used by more than one item").format(order),
					exc=frappe.ValidationError,
				)
			seen.add(order)

	def validate_single_active_path(self):
		if not self.is_active:
			return

		other = frappe.db.exists(
			"Learning Path",
			{"organization": self.organization, "is_active": 1, "name": ["!=", self.name]},
		)
		if other:
			frappe.throw(
				_("Organization {0} already has an active learning path: {1}").format(self.organization, other),
				exc=frappe.ValidationError,
			)

	def on_update(self):
		progress_cache.invalidate_after_commit(progress_cache.invalidate_organization, self.organization)

	def on_trash(self):
		progress_cache.invalidate_after_commit(progress_cache.invalidate_organization, self.organization)
