"""
Points Awarder - idempotent write boundary for the points ledger.

Every award is keyed on (user, content, reason). Awarding the same key
twice, for example from a retried request or a repeated document save,
produces exactly one ledger entry. The check happens here, before insert,
and the ledger store's unique key catches concurrent duplicates that pass
the check at the same time.

A ledger store provides:
- exists(idempotency_key) -> bool
- insert(entry) -> bool  (False when the key already exists)
"""

import logging
from datetime import datetime, timezone

from pathway.services.progression_engine.points_ledger import week_start

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_TYPE = "content"


def build_idempotency_key(user_id, content_id, reason):
	"""Key identifying one award: "{user}:{content}:{reason}"."""
	return f"{user_id}:{content_id or '-'}:{reason}"


def award_points(ledger, user_id, reason, points, content_id=None, source_type=DEFAULT_SOURCE_TYPE, earned_at=None):
	"""
	Award points once per (user, content, reason).

	Args:
		ledger: Ledger store with exists() and insert()
		user_id (str): User earning the points
		reason (str): Point-earning reason, e.g. video_complete
		points (int): Points to award (must be positive)
		content_id (str): Content the award is for
		source_type (str): Kind of source the award came from
		earned_at (datetime): Award time (defaults to now in UTC)

	Returns:
		dict: awarded (bool), points (0 when not awarded), reason,
		idempotency_key and the stored entry when awarded

	Raises:
		ValueError: If user or reason is missing or points is not a positive integer
	"""
	if not user_id:
		raise ValueError("user_id is required to award points")
	if not reason:
		raise ValueError("reason is required to award points")
	if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
		raise ValueError(f"points must be a positive integer, got {points!r}")

	idempotency_key = build_idempotency_key(user_id, content_id, reason)

	if ledger.exists(idempotency_key):
		logger.debug(f"Points already awarded for key={idempotency_key}")
		return _not_awarded(reason, idempotency_key)

	earned_at = earned_at or datetime.now(timezone.utc)
	entry = {
		"idempotency_key": idempotency_key,
		"user": user_id,
		"points": points,
		"reason": reason,
		"content_id": content_id,
		"source_type": source_type,
		"earned_at": earned_at,
		"period_week": week_start(earned_at),
	}

	if not ledger.insert(entry):
		logger.info(f"Concurrent award detected for key={idempotency_key}, keeping the first entry")
		return _not_awarded(reason, idempotency_key)

	logger.info(f"Points awarded to {user_id}: +{points} for {reason} (content={content_id})")

	return {
		"awarded": True,
		"points": points,
		"reason": reason,
		"idempotency_key": idempotency_key,
		"entry": entry,
	}


def _not_awarded(reason, idempotency_key):
	return {
		"awarded": False,
		"points": 0,
		"reason": reason,
		"idempotency_key": idempotency_key,
		"entry": None,
	}
