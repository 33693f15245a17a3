"""Update category use case."""

from uuid import UUID

import structlog

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember
from forumgate.application.ports import CacheManager
from forumgate.domain.entities import Category, Event
from forumgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from forumgate.domain.value_objects import EventType

logger = structlog.get_logger()


class UpdateCategoryUseCase:
    """Rename a category and change its default permission set."""

    def __init__(
        self,
        unit_of_work_factory: type,
        cache_manager: CacheManager,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache_manager

    async def execute(
        self,
        actor: CurrentMember,
        site_id: UUID,
        category_id: UUID,
        name: str,
        permission_set_id: UUID,
    ) -> Category:
        """Update category. Actor must be admin.

        Every forum of the site may inherit from this category, so all
        forum permission set keys of the site are evicted.
        """
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can update categories")
        if not name.strip():
            raise ValidationError("Category name must not be empty")

        async with self._uow_factory() as uow:
            category = await uow.categories.get_by_id(site_id, category_id)
            if not category:
                raise NotFound("Category", category_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set or permission_set.site_id != site_id:
                raise NotFound("PermissionSet", permission_set_id)

            category.name = name.strip()
            category.permission_set_id = permission_set_id
            await uow.categories.update(category)
            await uow.events.add(
                Event.record(
                    "Category",
                    EventType.UPDATED,
                    category_id,
                    member_id=actor.id,
                    data={"name": category.name, "permission_set_id": str(permission_set_id)},
                )
            )

        self._cache.remove_prefix(CacheKeys.forum_permission_sets(site_id))
        self._cache.remove(CacheKeys.current_forums(site_id))
        logger.info(
            "category_updated",
            site_id=str(site_id),
            category_id=str(category_id),
            permission_set_id=str(permission_set_id),
            actor=actor.user_id,
        )
        return category
