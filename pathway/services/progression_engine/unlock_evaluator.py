"""Unlock evaluator for progression engine.

This module computes unlock states (locked/unlocked) for every item of a
learning path based on the path's unlock mode, the item's position in the
sequence, the learner's completion of the previous item and today's date.

Unlock modes:
	- manual: an admin unlocks each item explicitly
	- time_based: item i unlocks on enrollment_date + i * unlock_interval_days
	- completion_based: item i unlocks once item i-1 is complete
	- hybrid: both the time and the completion conditions must hold

The first item of a path is always unlocked, whatever the mode.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from pathway.services.progression_engine.constants import (
	COMPLETION_REQUIREMENTS,
	LOCK_AWAITING_ADMIN,
	LOCK_COMPLETION,
	LOCK_TIME,
	LOCK_TIME_AND_COMPLETION,
	REASON_AWAITING_ADMIN,
	REASON_COMPLETE_PREVIOUS,
	REASON_UNLOCKS_ON,
	REASON_UNLOCKS_ON_AFTER_PREVIOUS,
	UNLOCK_COMPLETION_BASED,
	UNLOCK_HYBRID,
	UNLOCK_MANUAL,
	UNLOCK_MODES,
	UNLOCK_TIME_BASED,
)
from pathway.services.progression_engine.dates import add_days, format_date, to_date

logger = logging.getLogger(__name__)

TIME_GATED_MODES = (UNLOCK_TIME_BASED, UNLOCK_HYBRID)


def validate_path_config(path: Dict[str, Any]) -> None:
	"""Validate learning path configuration before evaluation.

	Args:
		path: Learning path dictionary

	Raises:
		ValueError: If the unlock mode or completion requirement is unknown,
			unlock_interval_days is not a non-negative integer, or a
			time-gated path has no enrollment date
	"""
	unlock_mode = path.get("unlock_mode")
	if unlock_mode not in UNLOCK_MODES:
		raise ValueError(
			f"Unknown unlock mode '{unlock_mode}', expected one of {', '.join(UNLOCK_MODES)}"
		)

	completion_requirement = path.get("completion_requirement")
	if completion_requirement not in COMPLETION_REQUIREMENTS:
		raise ValueError(
			f"Unknown completion requirement '{completion_requirement}', "
			f"expected one of {', '.join(COMPLETION_REQUIREMENTS)}"
		)

	interval = path.get("unlock_interval_days", 0)
	if interval is None:
		interval = 0
	if isinstance(interval, bool) or not isinstance(interval, int):
		raise ValueError(f"unlock_interval_days must be an integer, got {interval!r}")
	if interval < 0:
		raise ValueError(f"unlock_interval_days must be >= 0, got {interval}")

	if unlock_mode in TIME_GATED_MODES and not path.get("enrollment_date"):
		raise ValueError(f"Learning path in '{unlock_mode}' mode requires an enrollment_date")


def sort_items(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
	"""Sort path items by sequence_order.

	Gaps are kept as-is. The sort is stable, so items sharing a
	sequence_order keep their input order. Items without an order sort last.
	"""
	return sorted(
		items,
		key=lambda item: (item.get("sequence_order") is None, item.get("sequence_order") or 0),
	)


def compute_time_unlock_date(
	item: Dict[str, Any],
	index: int,
	enrollment_date: Optional[date],
	unlock_interval_days: int,
) -> Optional[date]:
	"""Compute the date an item unlocks on under the time rule.

	An explicit item unlock_date overrides the schedule. Otherwise the
	item unlocks index * unlock_interval_days whole days after enrollment.

	Args:
		item: Learning path item
		index: Position of the item in the sorted sequence (0-based)
		enrollment_date: Path enrollment date
		unlock_interval_days: Days between consecutive unlocks

	Returns:
		Unlock date, or None when neither an override nor an enrollment
		date is available
	"""
	override = to_date(item.get("unlock_date"))
	if override:
		return override

	if enrollment_date is None:
		return None

	return add_days(enrollment_date, index * (unlock_interval_days or 0))


def evaluate_unlocks(
	path: Optional[Dict[str, Any]],
	items: List[Dict[str, Any]],
	is_item_complete: Callable[[Dict[str, Any]], bool],
	today: date,
) -> List[Dict[str, Any]]:
	"""Evaluate unlock state for each item of a learning path.

	Items must already be sorted by sequence_order; evaluation is serial
	because item i depends on the completion of item i-1.

	Args:
		path: Learning path configuration (None when the organization has no path)
		items: Path items sorted ascending by sequence_order
		is_item_complete: Callable deciding whether an item is complete
		today: Evaluation date

	Returns:
		List of dicts, one per item, with content_id, sequence_order,
		is_unlocked, unlock_reason, unlock_date and lock_cause. An empty list
		means there is no sequence and nothing is gated.

	Raises:
		ValueError: If the path configuration is invalid
	"""
	if not path or not items:
		logger.debug("No learning path or no items, content is unconstrained")
		return []

	validate_path_config(path)

	unlock_mode = path["unlock_mode"]
	enrollment_date = to_date(path.get("enrollment_date"))
	interval = path.get("unlock_interval_days") or 0

	results = []
	for index, item in enumerate(items):
		time_unlock_date = compute_time_unlock_date(item, index, enrollment_date, interval)
		if index == 0:
			state = _unlocked()
		else:
			previous_complete = bool(is_item_complete(items[index - 1]))
			state = _apply_unlock_mode(unlock_mode, item, time_unlock_date, previous_complete, today)

		results.append({
			"content_id": item.get("content_id"),
			"sequence_order": item.get("sequence_order"),
			"is_unlocked": state["is_unlocked"],
			"unlock_reason": state["unlock_reason"],
			"lock_cause": state["lock_cause"],
			"unlock_date": time_unlock_date,
		})

	locked = sum(1 for result in results if not result["is_unlocked"])
	logger.debug(f"Evaluated {len(results)} items in mode={unlock_mode}, locked={locked}")
	return results


def _apply_unlock_mode(
	unlock_mode: str,
	item: Dict[str, Any],
	time_unlock_date: Optional[date],
	previous_complete: bool,
	today: date,
) -> Dict[str, Any]:
	if unlock_mode == UNLOCK_MANUAL:
		if item.get("is_manually_unlocked"):
			return _unlocked()
		return _locked(REASON_AWAITING_ADMIN, LOCK_AWAITING_ADMIN)

	if unlock_mode == UNLOCK_TIME_BASED:
		if _time_reached(time_unlock_date, today):
			return _unlocked()
		return _locked(_unlocks_on(time_unlock_date), LOCK_TIME)

	if unlock_mode == UNLOCK_COMPLETION_BASED:
		if previous_complete:
			return _unlocked()
		return _locked(REASON_COMPLETE_PREVIOUS, LOCK_COMPLETION)

	# UNLOCK_HYBRID: both conditions must hold
	time_ready = _time_reached(time_unlock_date, today)
	if time_ready and previous_complete:
		return _unlocked()

	if not time_ready and not previous_complete:
		reason = REASON_UNLOCKS_ON_AFTER_PREVIOUS.format(date=format_date(time_unlock_date))
		return _locked(reason, LOCK_TIME_AND_COMPLETION)

	if not time_ready:
		return _locked(_unlocks_on(time_unlock_date), LOCK_TIME)

	return _locked(REASON_COMPLETE_PREVIOUS, LOCK_COMPLETION)


def _time_reached(time_unlock_date: Optional[date], today: date) -> bool:
	return time_unlock_date is not None and today >= time_unlock_date


def _unlocks_on(time_unlock_date: Optional[date]) -> str:
	return REASON_UNLOCKS_ON.format(date=format_date(time_unlock_date))


def _unlocked() -> Dict[str, Any]:
	return {"is_unlocked": True, "unlock_reason": None, "lock_cause": None}


def _locked(reason: str, cause: str) -> Dict[str, Any]:
	return {"is_unlocked": False, "unlock_reason": reason, "lock_cause": cause}
