"""
Progression Engine Service Module

Pure, stateless rules deciding what a learner can open, what counts as
complete, and how completion events turn into points, streaks and rankings.
Nothing in this package performs I/O or reads the clock: callers load the
data and pass today's date in.

Services:
    - unlock_evaluator: Per-item unlock state for the four unlock modes
    - completion_classifier: Four-step completion flags and module completion
    - sequence_evaluator: Per-item progress map and summary for a learner
    - points_ledger: Weekly period keys and points aggregation
    - streak_tracker: Streak interpretation and next-day advancement
    - leaderboard_ranker: Competition-ranked, privacy-formatted leaderboards
"""

from pathway.services.progression_engine.unlock_evaluator import (
	evaluate_unlocks,
	validate_path_config,
	sort_items,
	compute_time_unlock_date,
)
from pathway.services.progression_engine.completion_classifier import (
	derive_completion_flags,
	is_module_complete,
	count_completed_steps,
	earned_reasons,
)
from pathway.services.progression_engine.sequence_evaluator import (
	evaluate_sequence,
	evaluate_content_access,
	find_next_item,
)
from pathway.services.progression_engine.points_ledger import (
	week_start,
	aggregate_points,
	filter_entries_for_period,
	summarize_points,
)
from pathway.services.progression_engine.streak_tracker import (
	interpret_streak,
	apply_activity,
)
from pathway.services.progression_engine.leaderboard_ranker import (
	rank_leaderboard,
	format_display_name,
	assign_competition_ranks,
)

__all__ = [
	"evaluate_unlocks",
	"validate_path_config",
	"sort_items",
	"compute_time_unlock_date",
	"derive_completion_flags",
	"is_module_complete",
	"count_completed_steps",
	"earned_reasons",
	"evaluate_sequence",
	"evaluate_content_access",
	"find_next_item",
	"week_start",
	"aggregate_points",
	"filter_entries_for_period",
	"summarize_points",
	"interpret_streak",
	"apply_activity",
	"rank_leaderboard",
	"format_display_name",
	"assign_competition_ranks",
]
