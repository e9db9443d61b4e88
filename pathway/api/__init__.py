"""
Pathway API Package

Domain-specific modules for the whitelisted endpoints. All public
@frappe.whitelist() functions are re-exported from this module so they can
be called as pathway.api.<function>.

Modules:
- utils: Session, membership and role helpers
- sequence: Learning path progress and content access
- leaderboard: Leaderboard domain
- gamification: Points and streaks
- learning_path: Learning path administration
"""

from .sequence import get_sequence, get_content_access
from .leaderboard import get_leaderboard
from .gamification import get_points, get_streak
from .learning_path import get_learning_path, save_learning_path, set_item_unlock

__all__ = [
    # Sequence
    'get_sequence',
    'get_content_access',
    # Leaderboard
    'get_leaderboard',
    # Gamification
    'get_points',
    'get_streak',
    # Learning Path
    'get_learning_path',
    'save_learning_path',
    'set_item_unlock',
]
