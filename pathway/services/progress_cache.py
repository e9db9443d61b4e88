"""
Progress Cache - pass-through Redis cache at the data-loading boundary.

Slices of progression data (learning path, completion states, ledger
entries, streaks, members) are cached per (organization, user, data kind)
with a TTL. The engine itself never sees the cache: loaders are wrapped
here and the engine receives plain values.

Document events drop keys through invalidate_after_commit, so a concurrent
read cannot refill the cache from rows the saving transaction is about to
replace.

Invalidation:
- Learning Path or Pathway Membership change: drop the organization prefix
- Pathway Settings change: drop everything
- Content Completion or ledger change: drop the user's prefix in each of
  their organizations
"""

import logging
from functools import partial

import frappe

from pathway.services.settings import get_settings
from pathway.utils.redis_keys import (
	PROGRESS_CACHE_PREFIX,
	get_organization_prefix,
	get_organization_user_prefix,
	get_progress_cache_key,
)

logger = logging.getLogger(__name__)

KIND_LEARNING_PATH = "learning_path"
KIND_COMPLETIONS = "completions"
KIND_MEMBERS = "members"
KIND_POINTS = "points"
KIND_STREAKS = "streaks"


def get_or_load(data_kind, user_id, organization_id, loader):
	"""Return a cached slice, loading and caching it on a miss.

	Args:
		data_kind: Kind of data (one of the KIND_* constants, optionally
			suffixed with a qualifier such as a team or period)
		user_id: User the slice belongs to, or None for organization-wide data
		organization_id: Organization the slice belongs to
		loader: Zero-argument callable producing the value on a miss

	Returns:
		Cached or freshly loaded value
	"""
	key = get_progress_cache_key(user_id, organization_id, data_kind)

	try:
		cached = frappe.cache().get_value(key)
	except Exception as e:
		frappe.log_error(message=f"Progress cache read failed for {key}: {str(e)}", title="Progress Cache Error")
		return loader()

	if cached is not None:
		logger.debug(f"Cache hit for key={key}")
		return cached

	logger.debug(f"Cache miss for key={key}, loading")
	value = loader()

	try:
		frappe.cache().set_value(key, value, expires_in_sec=get_settings()["cache_ttl_seconds"])
	except Exception as e:
		frappe.log_error(message=f"Progress cache write failed for {key}: {str(e)}", title="Progress Cache Error")

	return value


def invalidate_organization(organization_id):
	"""Drop every cached slice for an organization."""
	frappe.cache().delete_keys(get_organization_prefix(organization_id))
	logger.info(f"Invalidated progress cache for organization={organization_id}")


def invalidate_user(user_id, organization_ids):
	"""Drop one user's cached slices, and the organization-wide leaderboard inputs.

	Args:
		user_id: User whose data changed
		organization_ids: Organizations the user belongs to
	"""
	for organization_id in organization_ids:
		frappe.cache().delete_keys(get_organization_user_prefix(organization_id, user_id))
		# Ledger and streak slices for leaderboards are cached organization wide
		frappe.cache().delete_keys(get_organization_user_prefix(organization_id, None))
	logger.info(f"Invalidated progress cache for user={user_id} in {len(organization_ids)} organizations")


def invalidate_all():
	"""Drop every cached slice of every organization."""
	frappe.cache().delete_keys(PROGRESS_CACHE_PREFIX)
	logger.info("Invalidated all progress cache entries")


def invalidate_after_commit(invalidate, *args):
	"""Run an invalidation helper once the current transaction commits.

	Args:
		invalidate: One of the invalidate_* functions of this module
		*args: Arguments passed to it
	"""
	frappe.db.after_commit.add(partial(_run_invalidation, invalidate, *args))


def _run_invalidation(invalidate, *args):
	try:
		invalidate(*args)
	except Exception as e:
		frappe.log_error(
			message=f"Progress cache invalidation {invalidate.__name__}{args} failed: {str(e)}",
			title="Progress Cache Error",
		)
