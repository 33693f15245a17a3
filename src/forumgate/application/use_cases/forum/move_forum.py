"""Move forum use case."""

from uuid import UUID

import structlog

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember
from forumgate.application.ports import CacheManager
from forumgate.domain.entities import Event
from forumgate.domain.exceptions import NotFound, PermissionDenied
from forumgate.domain.value_objects import EventType

logger = structlog.get_logger()


class MoveForumUseCase:
    """Move a forum to another category of the same site."""

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
        forum_id: UUID,
        category_id: UUID,
    ) -> None:
        """Move forum. Its inherited permission set changes with the category."""
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can move forums")

        async with self._uow_factory() as uow:
            forum = await uow.forums.get_by_id(site_id, forum_id)
            if not forum:
                raise NotFound("Forum", forum_id)
            category = await uow.categories.get_by_id(site_id, category_id)
            if not category:
                raise NotFound("Category", category_id)
            if forum.category_id == category_id:
                return
            await uow.forums.move_to_category(forum_id, category_id)
            await uow.events.add(
                Event.record(
                    "Forum",
                    EventType.UPDATED,
                    forum_id,
                    member_id=actor.id,
                    data={
                        "from_category_id": str(forum.category_id),
                        "category_id": str(category_id),
                    },
                )
            )

        self._cache.remove(CacheKeys.forum_permission_set(site_id, forum_id))
        self._cache.remove(CacheKeys.current_forums(site_id))
        logger.info(
            "forum_moved",
            site_id=str(site_id),
            forum_id=str(forum_id),
            category_id=str(category_id),
            actor=actor.user_id,
        )
