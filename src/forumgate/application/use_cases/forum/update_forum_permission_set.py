"""Update forum permission set use case."""

from uuid import UUID

import structlog

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember
from forumgate.application.ports import CacheManager
from forumgate.domain.entities import Event
from forumgate.domain.exceptions import NotFound, PermissionDenied
from forumgate.domain.value_objects import EventType

logger = structlog.get_logger()


class UpdateForumPermissionSetUseCase:
    """Set or clear a forum's own permission set."""

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
        permission_set_id: UUID | None,
    ) -> None:
        """Assign permission_set_id to forum, or None to inherit from category."""
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can update forums")

        async with self._uow_factory() as uow:
            forum = await uow.forums.get_by_id(site_id, forum_id)
            if not forum:
                raise NotFound("Forum", forum_id)
            if permission_set_id is not None:
                permission_set = await uow.permission_sets.get_by_id(permission_set_id)
                if not permission_set or permission_set.site_id != site_id:
                    raise NotFound("PermissionSet", permission_set_id)
            await uow.forums.update_permission_set(forum_id, permission_set_id)
            await uow.events.add(
                Event.record(
                    "Forum",
                    EventType.UPDATED,
                    forum_id,
                    member_id=actor.id,
                    data={
                        "permission_set_id": str(permission_set_id) if permission_set_id else None
                    },
                )
            )

        self._cache.remove(CacheKeys.forum_permission_set(site_id, forum_id))
        self._cache.remove(CacheKeys.current_forums(site_id))
        logger.info(
            "forum_permission_set_updated",
            site_id=str(site_id),
            forum_id=str(forum_id),
            permission_set_id=str(permission_set_id) if permission_set_id else None,
            actor=actor.user_id,
        )
