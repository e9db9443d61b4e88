"""Frappe-backed integration tests; they need a bench site with the pathway app installed."""
