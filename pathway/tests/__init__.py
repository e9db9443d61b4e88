"""
Pathway App Test Suite

Test Modules:
- unit/progression_engine: Pure unlock, completion, points, streak and ranking rules
- unit/gamification: Idempotent points awarding against an in-memory ledger
- unit/test_redis_keys: Cache key layout
- contract: Response shapes of the sequence and leaderboard operations
- integration: Frappe-backed flows (require a bench site)
"""
