"""Permission model builder - resolves the grants governing a forum."""

from uuid import UUID

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import PermissionModel
from forumgate.application.ports import CacheManager
from forumgate.domain.exceptions import NotFound
from forumgate.domain.value_objects import EffectivePermissionSet


class PermissionModelBuilder:
    """Builds the set of (role, type) grants for a forum.

    The forum's effective permission set and the rows of each permission
    set are memoized in the cache; both keys are evicted by the
    administrative use cases that change them. Role matching is left to
    the security service.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        cache_manager: CacheManager,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache_manager

    async def build_permission_models_by_forum_id(
        self, site_id: UUID, forum_id: UUID
    ) -> frozenset[PermissionModel]:
        """Return grants of the forum's effective permission set.

        Raises NotFound when the forum does not exist in the site. A forum
        without a resolvable permission set yields an empty set.
        """
        effective = await self.resolve_permission_set(site_id, forum_id)
        if not effective.is_resolved:
            return frozenset()

        permission_set_id = effective.permission_set_id
        return await self._cache.get_or_set(
            CacheKeys.permission_set(permission_set_id),
            lambda: self._load_permission_models(permission_set_id),
        )

    async def resolve_permission_set(
        self, site_id: UUID, forum_id: UUID
    ) -> EffectivePermissionSet:
        """Resolve the forum's own permission set, else its category's."""
        return await self._cache.get_or_set(
            CacheKeys.forum_permission_set(site_id, forum_id),
            lambda: self._load_effective_permission_set(site_id, forum_id),
        )

    async def _load_effective_permission_set(
        self, site_id: UUID, forum_id: UUID
    ) -> EffectivePermissionSet:
        async with self._uow_factory() as uow:
            refs = await uow.forums.get_permission_set_refs(site_id, forum_id)
        if refs is None:
            raise NotFound("Forum", forum_id)
        return EffectivePermissionSet.resolve(
            refs.forum_permission_set_id, refs.category_permission_set_id
        )

    async def _load_permission_models(
        self, permission_set_id: UUID
    ) -> frozenset[PermissionModel]:
        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list_by_permission_set(permission_set_id)
        return frozenset(
            PermissionModel(role_id=p.role_id, type=p.type) for p in permissions
        )
