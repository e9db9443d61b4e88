"""
Completion Events - turn Content Completion changes into points and streaks.

Registered in hooks.py on Content Completion on_update, which Frappe also
runs right after an insert.
Every save re-derives the reasons the completion state qualifies for and
awards each of them through the idempotent points awarder, so replayed or
repeated saves never double-award. A streak activity is recorded only when
at least one new award was made.

Gamification never fails the completion update that triggered it: errors
are logged with frappe.log_error and the save goes through.
"""

import frappe

from pathway.services import progress_cache, repositories
from pathway.services.gamification.ledger_store import FrappePointsLedger
from pathway.services.gamification.points_awarder import award_points
from pathway.services.gamification.streak_recorder import record_activity
from pathway.services.progression import utc_today
from pathway.services.progression_engine.completion_classifier import earned_reasons
from pathway.services.settings import get_settings


def on_content_completion_update(doc, method=None):
	"""Document event handler for Content Completion."""
	reasons = earned_reasons(doc.as_dict())

	if reasons:
		award_gamification(doc.user, reasons, doc.content_id)

	try:
		progress_cache.invalidate_after_commit(
			progress_cache.invalidate_user,
			doc.user,
			repositories.get_user_organizations(doc.user),
		)
	except Exception as e:
		frappe.log_error(
			message=f"Failed to invalidate progress cache for {doc.user}: {str(e)}",
			title="Progress Cache Error",
		)


def award_gamification(user_id, reasons, content_id, today=None):
	"""
	Award points for each reason and record a streak activity.

	Args:
	    user_id (str): Frappe User.name
	    reasons (list): Point-earning reasons
	    content_id (str): Content the reasons relate to
	    today (date): Activity date (defaults to today in UTC)

	Returns:
	    dict: awards (list of award results) and streak (streak result or None)
	"""
	results = {"awards": [], "streak": None}

	try:
		ledger = FrappePointsLedger()
		points_config = get_settings()["points"]

		for reason in reasons:
			results["awards"].append(
				award_points(ledger, user_id, reason, points_config[reason], content_id=content_id)
			)

		if any(award["awarded"] for award in results["awards"]):
			results["streak"] = record_activity(user_id, today or utc_today())

		frappe.logger().info(
			f"Gamification for {user_id} on {content_id}: "
			f"{sum(award['points'] for award in results['awards'])} points"
		)
	except Exception as e:
		frappe.log_error(
			message=f"Gamification failed for user={user_id}, content={content_id}: {str(e)}",
			title="Gamification Error",
		)

	return results
