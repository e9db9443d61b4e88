"""Sequence evaluator for progression engine.

This module joins the unlock evaluator and the completion classifier into
the per-item progress map a learner sees for their organization's path:
1. Sort path items by sequence_order
2. Classify each item's completion under the path requirement
3. Evaluate unlock state item by item
4. Summarize completion percentage and the next module to work on

Every caller (sequence listing, content access checks, progress summary)
goes through evaluate_sequence so they all apply the same rules.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from pathway.services.progression_engine.completion_classifier import (
	count_completed_steps,
	is_module_complete,
)
from pathway.services.progression_engine.dates import format_date
from pathway.services.progression_engine.unlock_evaluator import evaluate_unlocks, sort_items

logger = logging.getLogger(__name__)


def evaluate_sequence(
	path: Optional[Dict[str, Any]],
	completion_states: Dict[str, Dict[str, Any]],
	today: date,
) -> Dict[str, Any]:
	"""Evaluate a learner's progress through a learning path.

	Args:
		path: Learning path with an "items" list, or None when the
			organization has no active path
		completion_states: Mapping of content_id to completion state for
			the learner; content without an entry is treated as not started
		today: Evaluation date

	Returns:
		Dictionary containing:
		- has_sequence: False when there is no path or it has no items
		- path_name, unlock_mode, completion_requirement
		- items: per-item progress (content_id, sequence_order, is_optional,
		  is_unlocked, is_complete, unlock_date, unlock_reason, lock_cause,
		  progress_percent, completed_steps)
		- summary: total_items, completed_items, unlocked_items,
		  completion_percentage, next_content_id

	Raises:
		ValueError: If the path configuration is invalid
	"""
	items = sort_items((path or {}).get("items") or [])

	if not path or not items:
		return _no_sequence()

	completion_requirement = path.get("completion_requirement")

	def is_item_complete(item: Dict[str, Any]) -> bool:
		return is_module_complete(completion_states.get(item.get("content_id")), completion_requirement)

	unlocks = evaluate_unlocks(path, items, is_item_complete, today)

	sequence = []
	for item, unlock in zip(items, unlocks):
		state = completion_states.get(item.get("content_id"))
		sequence.append({
			"content_id": item.get("content_id"),
			"sequence_order": item.get("sequence_order"),
			"is_optional": bool(item.get("is_optional")),
			"is_unlocked": unlock["is_unlocked"],
			"is_complete": is_item_complete(item),
			"unlock_date": format_date(unlock["unlock_date"]),
			"unlock_reason": unlock["unlock_reason"],
			"lock_cause": unlock["lock_cause"],
			"progress_percent": (state or {}).get("video_progress_percent") or 0,
			"completed_steps": count_completed_steps(state),
		})

	summary = _summarize(sequence)
	logger.info(
		f"Sequence evaluated: path={path.get('name')}, mode={path.get('unlock_mode')}, "
		f"completed={summary['completed_items']}/{summary['total_items']}, "
		f"next={summary['next_content_id']}"
	)

	return {
		"has_sequence": True,
		"path_name": path.get("path_name"),
		"unlock_mode": path.get("unlock_mode"),
		"completion_requirement": completion_requirement,
		"items": sequence,
		"summary": summary,
	}


def evaluate_content_access(sequence: Dict[str, Any], content_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
	"""Resolve access for arbitrary content ids against an evaluated sequence.

	Content that is not part of the path, and all content when there is no
	sequence, is unlocked: a missing configuration never locks a learner out.

	Args:
		sequence: Result of evaluate_sequence
		content_ids: Content ids to check

	Returns:
		Mapping of content_id to {is_unlocked, unlock_reason, in_sequence}
	"""
	by_content = {}
	if sequence.get("has_sequence"):
		for item in sequence["items"]:
			# First occurrence wins when a content id appears twice
			by_content.setdefault(item["content_id"], item)

	access = {}
	for content_id in content_ids:
		item = by_content.get(content_id)
		if item is None:
			access[content_id] = {"is_unlocked": True, "unlock_reason": None, "in_sequence": False}
		else:
			access[content_id] = {
				"is_unlocked": item["is_unlocked"],
				"unlock_reason": item["unlock_reason"],
				"in_sequence": True,
			}

	return access


def find_next_item(sequence_items: List[Dict[str, Any]]) -> Optional[str]:
	"""Find the first unlocked item that is not yet complete."""
	for item in sequence_items:
		if item["is_unlocked"] and not item["is_complete"]:
			return item["content_id"]
	return None


def _summarize(sequence_items: List[Dict[str, Any]]) -> Dict[str, Any]:
	total = len(sequence_items)
	completed = sum(1 for item in sequence_items if item["is_complete"])
	unlocked = sum(1 for item in sequence_items if item["is_unlocked"])

	return {
		"total_items": total,
		"completed_items": completed,
		"unlocked_items": unlocked,
		"completion_percentage": _calculate_completion_percentage(completed, total),
		"next_content_id": find_next_item(sequence_items),
	}


def _calculate_completion_percentage(completed: int, total: int) -> float:
	if total == 0:
		return 0.0
	return round((completed / total) * 100, 2)


def _no_sequence() -> Dict[str, Any]:
	return {
		"has_sequence": False,
		"path_name": None,
		"unlock_mode": None,
		"completion_requirement": None,
		"items": [],
		"summary": {
			"total_items": 0,
			"completed_items": 0,
			"unlocked_items": 0,
			"completion_percentage": 0.0,
			"next_content_id": None,
		},
	}
