"""Progression orchestration.

This module wires the data-loading boundary to the pure progression engine
for every exposed operation:
1. Load the relevant slices (through the pass-through cache)
2. Evaluate them with the engine
3. Return JSON-ready dictionaries

The sequence and leaderboard pipelines are independent; both are reached
from page renders and API calls through the functions below, so the unlock
and ranking rules exist in exactly one place.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from pathway.services import progress_cache, repositories
from pathway.services.progression_engine import (
	leaderboard_ranker,
	points_ledger,
	sequence_evaluator,
	streak_tracker,
)
from pathway.services.progression_engine.constants import PERIOD_WEEKLY
from pathway.services.settings import get_settings

logger = logging.getLogger(__name__)


def utc_today():
	"""Today's date in UTC, the only clock read on the evaluation path."""
	return datetime.now(timezone.utc).date()


def evaluate_sequence(organization_id: str, user_id: str, today=None) -> Dict[str, Any]:
	"""Evaluate a learner's content sequence in an organization.

	Args:
		organization_id: Organization whose active learning path applies
		user_id: Learner
		today: Evaluation date (defaults to today in UTC)

	Returns:
		Sequence result from the engine: has_sequence, items, path_name,
		unlock_mode, completion_requirement and summary
	"""
	today = today or utc_today()
	path = _load_learning_path(organization_id)

	content_ids = [item["content_id"] for item in (path or {}).get("items") or []]
	completion_states = progress_cache.get_or_load(
		progress_cache.KIND_COMPLETIONS,
		user_id,
		organization_id,
		lambda: repositories.get_completion_states(user_id, content_ids),
	) if content_ids else {}

	return sequence_evaluator.evaluate_sequence(path, completion_states, today)


def get_content_access(
	organization_id: str,
	user_id: str,
	content_ids: Iterable[str],
	today=None,
) -> Dict[str, Dict[str, Any]]:
	"""Resolve whether each content item is open to the learner.

	Content outside the path, and all content when there is no path, is
	unlocked.
	"""
	sequence = evaluate_sequence(organization_id, user_id, today=today)
	return sequence_evaluator.evaluate_content_access(sequence, content_ids)


def compute_leaderboard(
	organization_id: str,
	user_id: str,
	team_id: Optional[str] = None,
	period: str = PERIOD_WEEKLY,
	today=None,
) -> Dict[str, Any]:
	"""Compute the ranked leaderboard for an organization or one of its teams.

	Args:
		organization_id: Organization to rank
		user_id: Requesting user, appended when outside the top entries
		team_id: Narrow the member set to a team when given
		period: 'weekly' or 'all_time'
		today: Reference date for the current week (defaults to today in UTC)

	Returns:
		Ranker output (entries, current_user_rank, current_user_points,
		total_participants, current_user_appended) plus period and scope
	"""
	points_ledger.validate_period(period)
	today = today or utc_today()
	scope_suffix = f":{team_id}" if team_id else ""

	members = progress_cache.get_or_load(
		f"{progress_cache.KIND_MEMBERS}{scope_suffix}",
		None,
		organization_id,
		lambda: repositories.get_organization_members(organization_id, team_id),
	)
	member_ids = [member["user_id"] for member in members]

	entries = progress_cache.get_or_load(
		f"{progress_cache.KIND_POINTS}:{period}:{points_ledger.week_start(today)}{scope_suffix}",
		None,
		organization_id,
		lambda: repositories.get_points_entries(member_ids, period, today),
	)
	points_by_user = points_ledger.aggregate_points(entries)

	streak_records = progress_cache.get_or_load(
		f"{progress_cache.KIND_STREAKS}{scope_suffix}",
		None,
		organization_id,
		lambda: repositories.get_streak_records(member_ids),
	)
	streaks_by_user = {
		member_id: streak_tracker.interpret_streak(record, today)["current_streak"]
		for member_id, record in streak_records.items()
	}

	result = leaderboard_ranker.rank_leaderboard(
		members,
		points_by_user,
		streaks_by_user,
		user_id,
		limit=get_settings()["leaderboard_size"],
	)

	logger.info(
		f"Leaderboard computed: organization={organization_id}, team={team_id}, period={period}, "
		f"participants={result['total_participants']}, current_user_rank={result['current_user_rank']}"
	)

	result.update({
		"period": period,
		"scope": "team" if team_id else "organization",
	})
	return result


def get_points_summary(user_id: str, today=None) -> Dict[str, Any]:
	"""Total, weekly and monthly points plus a per-reason breakdown for a user."""
	today = today or utc_today()
	entries = repositories.get_user_points_entries(user_id)
	summary = points_ledger.summarize_points(entries, today)
	summary["points_config"] = get_settings()["points"]
	return summary


def get_streak(user_id: str, today=None) -> Dict[str, Any]:
	"""Interpreted daily streak for a user, including whether it is at risk."""
	today = today or utc_today()
	record = repositories.get_streak_records([user_id]).get(user_id)
	return streak_tracker.interpret_streak(record, today)


def _load_learning_path(organization_id: str) -> Optional[Dict[str, Any]]:
	return progress_cache.get_or_load(
		progress_cache.KIND_LEARNING_PATH,
		None,
		organization_id,
		lambda: repositories.get_learning_path(organization_id),
	)
