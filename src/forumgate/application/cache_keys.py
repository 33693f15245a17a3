"""Deterministic cache keys."""

from uuid import UUID


class CacheKeys:
    """Builds cache keys for slow-changing lookups."""

    CURRENT_SITE = "current-site"
    CURRENT_FORUMS = "current-forums"
    FORUM_PERMISSION_SET = "forum-permission-set"
    PERMISSION_SET = "permission-set"

    @staticmethod
    def current_site(name: str) -> str:
        return f"{CacheKeys.CURRENT_SITE}:{name}"

    @staticmethod
    def current_forums(site_id: UUID) -> str:
        return f"{CacheKeys.CURRENT_FORUMS}:{site_id}"

    @staticmethod
    def forum_permission_set(site_id: UUID, forum_id: UUID) -> str:
        return f"{CacheKeys.FORUM_PERMISSION_SET}:{site_id}:{forum_id}"

    @staticmethod
    def forum_permission_sets(site_id: UUID | None = None) -> str:
        """Prefix matching every forum permission set key, optionally of one site."""
        if site_id is None:
            return f"{CacheKeys.FORUM_PERMISSION_SET}:"
        return f"{CacheKeys.FORUM_PERMISSION_SET}:{site_id}:"

    @staticmethod
    def permission_set(permission_set_id: UUID) -> str:
        return f"{CacheKeys.PERMISSION_SET}:{permission_set_id}"
