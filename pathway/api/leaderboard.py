"""
Leaderboard Domain Module

This module handles leaderboard retrieval and user ranking.
"""

import frappe
from frappe import _

from pathway.api.utils import get_membership, get_session_user, run_engine
from pathway.services import progression
from pathway.services.progression_engine.constants import PERIODS, PERIOD_WEEKLY

SCOPES = ("organization", "team")


@frappe.whitelist()
def get_leaderboard(scope="organization", period=PERIOD_WEEKLY):
    """
    Get leaderboard (weekly or all-time / organization or team).

    - Ties share a rank; the next distinct score resumes at its position.
    - Includes the user's own entry after the top entries when outside them.
    - A team scope falls back to the organization when the user has no team.

    Args:
        scope: 'organization' or 'team'
        period: 'weekly' or 'all_time'

    Returns:
        Leaderboard data with entries, current_user_rank, current_user_points,
        total_participants, current_user_appended, period and scope
    """
    if scope not in SCOPES:
        frappe.throw(_("Scope must be one of: {0}").format(", ".join(SCOPES)), exc=frappe.ValidationError)
    if period not in PERIODS:
        frappe.throw(_("Period must be one of: {0}").format(", ".join(PERIODS)), exc=frappe.ValidationError)

    user = get_session_user()
    membership = get_membership(user)

    team_id = membership.team if scope == "team" and membership.team else None

    return run_engine(
        progression.compute_leaderboard,
        membership.organization,
        user,
        team_id=team_id,
        period=period,
    )
