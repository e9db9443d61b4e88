"""
Constants for the progression engine.

Unlock modes, completion requirements, activity statuses and point reasons
shared by every entry point that evaluates a learning path.
"""

# Unlock modes (Learning Path.unlock_mode)
UNLOCK_MANUAL = "manual"
UNLOCK_TIME_BASED = "time_based"
UNLOCK_COMPLETION_BASED = "completion_based"
UNLOCK_HYBRID = "hybrid"

UNLOCK_MODES = (
	UNLOCK_MANUAL,
	UNLOCK_TIME_BASED,
	UNLOCK_COMPLETION_BASED,
	UNLOCK_HYBRID,
)

# Completion requirements (Learning Path.completion_requirement)
REQUIRE_VIDEO_ONLY = "video_only"
REQUIRE_WORKSHEET = "worksheet"
REQUIRE_FULL = "full"

COMPLETION_REQUIREMENTS = (
	REQUIRE_VIDEO_ONLY,
	REQUIRE_WORKSHEET,
	REQUIRE_FULL,
)

# Check-in and bold action statuses (Content Completion)
CHECKIN_STATUSES = ("none", "pending", "scheduled", "completed")
BOLD_ACTION_STATUSES = ("none", "pending", "pending_approval", "completed", "signed_off")

CHECKIN_DONE_STATUS = "completed"
BOLD_ACTION_DONE_STATUSES = ("completed", "signed_off")

VIDEO_COMPLETE_THRESHOLD = 90

# Lock causes, machine readable counterpart of the unlock reason text
LOCK_AWAITING_ADMIN = "awaiting_admin"
LOCK_TIME = "time"
LOCK_COMPLETION = "completion"
LOCK_TIME_AND_COMPLETION = "time_and_completion"

REASON_AWAITING_ADMIN = "Awaiting admin unlock"
REASON_COMPLETE_PREVIOUS = "Complete previous module first"
REASON_UNLOCKS_ON = "Unlocks {date}"
REASON_UNLOCKS_ON_AFTER_PREVIOUS = "Unlocks {date} (requires previous completion)"

# Point-earning reasons, in four-step workflow order
POINTS_VIDEO_COMPLETE = "video_complete"
POINTS_WORKSHEET_COMPLETE = "worksheet_complete"
POINTS_CHECKIN_COMPLETE = "checkin_complete"
POINTS_BOLD_ACTION_COMPLETE = "bold_action_complete"

DEFAULT_POINTS = {
	POINTS_VIDEO_COMPLETE: 10,
	POINTS_WORKSHEET_COMPLETE: 5,
	POINTS_CHECKIN_COMPLETE: 10,
	POINTS_BOLD_ACTION_COMPLETE: 15,
}

# Leaderboard
PERIOD_WEEKLY = "weekly"
PERIOD_ALL_TIME = "all_time"
PERIODS = (PERIOD_WEEKLY, PERIOD_ALL_TIME)

DEFAULT_LEADERBOARD_SIZE = 10
UNKNOWN_DISPLAY_NAME = "Unknown"

STREAK_TYPE_DAILY = "daily"
