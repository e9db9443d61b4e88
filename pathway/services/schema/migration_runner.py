"""
Migration runner for the Pathway DocTypes.

Called via the after_migrate hook. Each DocType definition is either
created, or, when the DocType already exists, topped up with the fields
added to its definition since it was created. Existing fields are never
altered or removed.

Creation order: learning path item (child table), learning path, progress
and gamification records, then organization membership and settings.
"""

import frappe

from pathway.services.schema.definitions.child_tables import CHILD_TABLE_DEFINITIONS
from pathway.services.schema.definitions.organization_doctypes import ORGANIZATION_DOCTYPE_DEFINITIONS
from pathway.services.schema.definitions.path_doctypes import PATH_DOCTYPE_DEFINITIONS
from pathway.services.schema.definitions.progress_doctypes import PROGRESS_DOCTYPE_DEFINITIONS

CREATED = "created"
UPDATED = "updated"
UNCHANGED = "unchanged"


def get_doctype_definitions():
	"""All DocType definitions, child tables before the DocTypes that embed them."""
	return [
		*CHILD_TABLE_DEFINITIONS,
		*PATH_DOCTYPE_DEFINITIONS,
		*PROGRESS_DOCTYPE_DEFINITIONS,
		*ORGANIZATION_DOCTYPE_DEFINITIONS,
	]


def ensure_doctype(definition):
	"""
	Create a DocType, or append the fields its stored version is missing.

	Args:
		definition (dict): DocType document dict with "name" and "fields"

	Returns:
		str: CREATED, UPDATED or UNCHANGED
	"""
	name = definition["name"]

	if not frappe.db.exists("DocType", name):
		frappe.get_doc(definition).insert(ignore_permissions=True)
		return CREATED

	doc = frappe.get_doc("DocType", name)
	existing = {df.fieldname for df in doc.fields}
	missing = [df for df in definition.get("fields", []) if df.get("fieldname") not in existing]
	if not missing:
		return UNCHANGED

	for df in missing:
		doc.append("fields", df)
	doc.save(ignore_permissions=True)
	frappe.logger().info(f"Added fields to {name}: {', '.join(df['fieldname'] for df in missing)}")
	return UPDATED


def run_migration():
	"""
	Entry point for the after_migrate hook.

	A failure stops the migration and is re-raised so bench reports it.

	Returns:
		dict: DocType names per outcome (created, updated, unchanged)
	"""
	frappe.logger().info("Starting Pathway DocType schema migration...")

	outcomes = {CREATED: [], UPDATED: [], UNCHANGED: []}
	for definition in get_doctype_definitions():
		try:
			outcome = ensure_doctype(definition)
		except Exception as e:
			frappe.logger().error(f"[MIGRATE] {definition['name']}: failed - {str(e)}")
			raise
		outcomes[outcome].append(definition["name"])
		frappe.logger().info(f"[MIGRATE] {definition['name']}: {outcome}")

	frappe.db.commit()
	frappe.logger().info(
		f"Pathway DocType schema migration completed: {len(outcomes[CREATED])} created, "
		f"{len(outcomes[UPDATED])} updated"
	)
	return outcomes
