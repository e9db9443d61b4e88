"""
Services Package for Pathway

This package contains the domain services behind the whitelisted API:
- progression_engine: Pure unlock, completion, points, streak and ranking rules
- repositories: Frappe-backed loaders for paths, completions, ledger and members
- progress_cache: Pass-through Redis cache at the data-loading boundary
- progression: Orchestration of loaders and engine for each exposed operation
- gamification: Idempotent points awarding and streak recording
- settings: Pathway Settings access with defaults
- schema: Programmatic DocType definitions and migration runner
"""
