"""
Leaderboard Ranker

Combines aggregated points and current streaks across a member set into a
ranked leaderboard.

Ranking rules:
- Entries are sorted by points descending; equal points are ordered by
  user id so the output is deterministic whatever order members arrive in
- Competition ranking: tied entries share a rank and the next distinct
  score resumes at its position ([100, 100, 80] -> [1, 1, 3])
- The top N entries are returned; a requesting user outside the top N is
  appended after them and flagged with current_user_appended
- Display names are reduced to first name and last initial
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pathway.services.progression_engine.constants import DEFAULT_LEADERBOARD_SIZE, UNKNOWN_DISPLAY_NAME

logger = logging.getLogger(__name__)


def format_display_name(full_name: Optional[str]) -> str:
	"""Format a display name for privacy: "First L.".

	Single-word names pass through unchanged; empty or missing names
	render as "Unknown".
	"""
	parts = (full_name or "").split()
	if not parts:
		return UNKNOWN_DISPLAY_NAME
	if len(parts) == 1:
		return parts[0]
	return f"{parts[0]} {parts[-1][0]}."


def assign_competition_ranks(entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
	"""Assign 1-indexed competition ranks to entries sorted by points descending.

	Args:
		entries: Leaderboard entries already sorted (mutated in place)

	Returns:
		The same list, with "rank" set on every entry
	"""
	for index, entry in enumerate(entries):
		if index > 0 and entry["points"] == entries[index - 1]["points"]:
			entry["rank"] = entries[index - 1]["rank"]
		else:
			entry["rank"] = index + 1
	return entries


def rank_leaderboard(
	members: Iterable[Dict[str, Any]],
	points_by_user: Dict[str, int],
	streaks_by_user: Dict[str, int],
	current_user_id: Optional[str],
	limit: int = DEFAULT_LEADERBOARD_SIZE,
) -> Dict[str, Any]:
	"""Build a ranked leaderboard for a member set.

	Args:
		members: Members already scoped to an organization or team, each
			with user_id and full_name
		points_by_user: Aggregated points per user (missing users have 0)
		streaks_by_user: Current streak per user (missing users have 0)
		current_user_id: Requesting user's id
		limit: Number of top entries to return

	Returns:
		Dictionary containing:
		- entries: top entries, plus the requesting user's entry appended
		  when they are ranked outside the top
		- current_user_rank: requesting user's rank, or None if not a member
		- current_user_points: requesting user's points (0 if not a member)
		- total_participants: number of distinct members ranked
		- current_user_appended: True when the last entry is the appended
		  requesting user rather than a contiguous rank

	Raises:
		ValueError: If limit is not a positive integer
	"""
	if limit < 1:
		raise ValueError(f"Leaderboard limit must be positive, got {limit}")

	entries = []
	seen = set()
	for member in members:
		user_id = member["user_id"]
		if user_id in seen:
			continue
		seen.add(user_id)
		entries.append({
			"rank": 0,
			"user_id": user_id,
			"display_name": format_display_name(member.get("full_name")),
			"points": int(points_by_user.get(user_id) or 0),
			"current_streak": int(streaks_by_user.get(user_id) or 0),
			"is_current_user": user_id == current_user_id,
		})

	entries.sort(key=lambda entry: (-entry["points"], str(entry["user_id"])))
	assign_competition_ranks(entries)

	current_user_entry = next((entry for entry in entries if entry["is_current_user"]), None)

	top_entries = entries[:limit]
	current_user_appended = False
	if current_user_entry is not None and current_user_entry not in top_entries:
		top_entries.append(current_user_entry)
		current_user_appended = True

	logger.debug(
		f"Ranked {len(entries)} members, current_user_rank="
		f"{current_user_entry['rank'] if current_user_entry else None}"
	)

	return {
		"entries": top_entries,
		"current_user_rank": current_user_entry["rank"] if current_user_entry else None,
		"current_user_points": current_user_entry["points"] if current_user_entry else 0,
		"total_participants": len(entries),
		"current_user_appended": current_user_appended,
	}
