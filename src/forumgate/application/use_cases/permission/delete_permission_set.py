"""Delete permission set use case."""

from uuid import UUID

import structlog

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember
from forumgate.application.ports import CacheManager
from forumgate.domain.entities import Event
from forumgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from forumgate.domain.value_objects import EventType

logger = structlog.get_logger()


class DeletePermissionSetUseCase:
    """Delete a permission set no category or forum references."""

    def __init__(
        self,
        unit_of_work_factory: type,
        cache_manager: CacheManager,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache_manager

    async def execute(self, actor: CurrentMember, permission_set_id: UUID) -> None:
        """Delete permission set. Actor must be admin."""
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can delete permission sets")

        async with self._uow_factory() as uow:
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", permission_set_id)
            if await uow.permission_sets.is_in_use(permission_set_id):
                raise ValidationError(
                    f"Permission set {permission_set_id} is assigned to a category or forum"
                )
            await uow.permission_sets.delete(permission_set_id)
            await uow.events.add(
                Event.record(
                    "PermissionSet",
                    EventType.DELETED,
                    permission_set_id,
                    member_id=actor.id,
                    data={"name": permission_set.name},
                )
            )

        self._cache.remove(CacheKeys.permission_set(permission_set_id))
        logger.info(
            "permission_set_deleted",
            permission_set_id=str(permission_set_id),
            actor=actor.user_id,
        )
