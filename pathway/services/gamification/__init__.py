"""
Gamification write side.

- points_awarder: Idempotent points awarding keyed on (user, content, reason)
- ledger_store: Points Ledger Entry persistence for the awarder
- streak_recorder: Applies qualifying activity to User Streak records
- completion_events: Content Completion hooks that award points and streaks
"""
