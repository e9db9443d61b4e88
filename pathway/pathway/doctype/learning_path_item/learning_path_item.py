# Copyright (c) 2026, pathway and contributors
# For license information, please see license.txt

from frappe.model.document import Document


class LearningPathItem(Document):
	pass
