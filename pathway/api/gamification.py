"""
Gamification Domain Module

This module exposes the requesting user's points and daily streak.
"""

import frappe

from pathway.api.utils import get_session_user
from pathway.services import progression


@frappe.whitelist()
def get_points():
    """
    Get the user's points summary.

    Returns:
        dict: total_points, week_points, month_points, breakdown (points per
        reason), recent (latest ledger entries) and points_config
    """
    user = get_session_user()
    return progression.get_points_summary(user)


@frappe.whitelist()
def get_streak():
    """
    Get the user's daily streak.

    A streak is at risk when it is still alive but nothing has been done
    today yet; one more day without activity resets it.

    Returns:
        dict: current_streak, longest_streak, last_activity_date,
        streak_start_date, total_active_days, total_activities, is_at_risk
    """
    user = get_session_user()
    return progression.get_streak(user)
