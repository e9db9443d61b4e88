"""
Redis key pattern constants for the progression data cache

All keys are namespaced under the `pathway:` prefix to avoid collisions
with other apps or Frappe internals.

Progress keys are laid out organization first so that a prefix delete can
drop everything cached for an organization, or for one user within it:
pathway:progress:{organization_id}:{user_id}:{data_kind}
"""

PROGRESS_CACHE_PREFIX = "pathway:progress:"
PROGRESS_CACHE_KEY = "pathway:progress:{organization_id}:{user_id}:{data_kind}"
ORGANIZATION_PREFIX = "pathway:progress:{organization_id}:"
ORGANIZATION_USER_PREFIX = "pathway:progress:{organization_id}:{user_id}:"

# Placeholder user for organization-wide data such as the learning path
ALL_USERS = "_all"


def get_progress_cache_key(user_id, organization_id, data_kind):
    """Get Redis key for one cached slice of progression data"""
    return PROGRESS_CACHE_KEY.format(
        organization_id=organization_id,
        user_id=user_id or ALL_USERS,
        data_kind=data_kind,
    )


def get_organization_prefix(organization_id):
    """Get Redis key prefix covering every cached slice of an organization"""
    return ORGANIZATION_PREFIX.format(organization_id=organization_id)


def get_organization_user_prefix(organization_id, user_id):
    """Get Redis key prefix covering one user's cached slices in an organization"""
    return ORGANIZATION_USER_PREFIX.format(organization_id=organization_id, user_id=user_id or ALL_USERS)
