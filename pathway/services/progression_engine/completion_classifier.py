"""Module completion classifier for progression engine.

Derives the four-step completion flags (video, worksheet, check-in,
bold action) from a learner's completion state and decides whether a
module counts as complete under a learning path's completion requirement.
"""

import logging
from typing import Any, Dict, List, Optional

from pathway.services.progression_engine.constants import (
	BOLD_ACTION_DONE_STATUSES,
	CHECKIN_DONE_STATUS,
	COMPLETION_REQUIREMENTS,
	POINTS_BOLD_ACTION_COMPLETE,
	POINTS_CHECKIN_COMPLETE,
	POINTS_VIDEO_COMPLETE,
	POINTS_WORKSHEET_COMPLETE,
	REQUIRE_VIDEO_ONLY,
	REQUIRE_WORKSHEET,
	VIDEO_COMPLETE_THRESHOLD,
)

logger = logging.getLogger(__name__)


def derive_completion_flags(state: Optional[Dict[str, Any]]) -> Dict[str, bool]:
	"""Derive the four step flags from a completion state.

	A missing state (no row for the user/content pair) yields all flags False.

	Args:
		state: Completion state dict with video_progress_percent,
			worksheet_submitted, checkin_status and bold_action_status

	Returns:
		Dictionary with video_complete, worksheet_submitted,
		checkin_complete and bold_action_complete
	"""
	if not state:
		return {
			"video_complete": False,
			"worksheet_submitted": False,
			"checkin_complete": False,
			"bold_action_complete": False,
		}

	return {
		"video_complete": (state.get("video_progress_percent") or 0) >= VIDEO_COMPLETE_THRESHOLD,
		"worksheet_submitted": bool(state.get("worksheet_submitted")),
		"checkin_complete": state.get("checkin_status") == CHECKIN_DONE_STATUS,
		"bold_action_complete": state.get("bold_action_status") in BOLD_ACTION_DONE_STATUSES,
	}


def is_module_complete(state: Optional[Dict[str, Any]], completion_requirement: str) -> bool:
	"""Classify a module as complete under the path's completion requirement.

	- video_only: video watched to the threshold
	- worksheet: video watched and worksheet submitted
	- full: bold action completed or signed off. Only the bold action
	  status is consulted; earlier steps are not re-verified.

	Args:
		state: Completion state for the module (None when no row exists)
		completion_requirement: One of video_only, worksheet, full

	Returns:
		True if the module is complete

	Raises:
		ValueError: If completion_requirement is not a known requirement
	"""
	if completion_requirement not in COMPLETION_REQUIREMENTS:
		raise ValueError(
			f"Unknown completion requirement '{completion_requirement}', "
			f"expected one of {', '.join(COMPLETION_REQUIREMENTS)}"
		)

	flags = derive_completion_flags(state)

	if completion_requirement == REQUIRE_VIDEO_ONLY:
		return flags["video_complete"]

	if completion_requirement == REQUIRE_WORKSHEET:
		return flags["video_complete"] and flags["worksheet_submitted"]

	# REQUIRE_FULL trusts the terminal bold action status
	return flags["bold_action_complete"]


def count_completed_steps(state: Optional[Dict[str, Any]]) -> int:
	"""Count how many of the four steps are done (0-4)."""
	return sum(1 for done in derive_completion_flags(state).values() if done)


def earned_reasons(state: Optional[Dict[str, Any]]) -> List[str]:
	"""List the point-earning reasons a completion state qualifies for.

	Reasons are returned in workflow order. Each reason is awarded at most
	once per content item by the ledger write boundary, so callers can pass
	the full list on every state change.
	"""
	flags = derive_completion_flags(state)
	reasons = []

	if flags["video_complete"]:
		reasons.append(POINTS_VIDEO_COMPLETE)
	if flags["worksheet_submitted"]:
		reasons.append(POINTS_WORKSHEET_COMPLETE)
	if flags["checkin_complete"]:
		reasons.append(POINTS_CHECKIN_COMPLETE)
	if flags["bold_action_complete"]:
		reasons.append(POINTS_BOLD_ACTION_COMPLETE)

	logger.debug(f"Earned reasons for state: {reasons}")
	return reasons

