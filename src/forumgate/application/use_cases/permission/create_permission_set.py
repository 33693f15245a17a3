"""Create permission set use case."""

from collections.abc import Iterable, Mapping
from uuid import UUID, uuid4

import structlog

from forumgate.application.dto import CurrentMember
from forumgate.application.use_cases.permission.update_permission_set import (
    build_permissions,
    describe_grants,
)
from forumgate.domain.entities import Event, PermissionSet
from forumgate.domain.exceptions import PermissionDenied, ValidationError
from forumgate.domain.value_objects import EventType

logger = structlog.get_logger()


class CreatePermissionSetUseCase:
    """Create a permission set with its initial grants."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor: CurrentMember,
        site_id: UUID,
        name: str,
        grants: Mapping[str, Iterable[str]] | None = None,
    ) -> PermissionSet:
        """Create permission set. Actor must be admin.

        Nothing references a new set yet, so no cache key is affected.
        """
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can create permission sets")
        if not name.strip():
            raise ValidationError("Permission set name must not be empty")

        permission_set = PermissionSet(id=uuid4(), site_id=site_id, name=name.strip())
        permissions = build_permissions(permission_set.id, grants or {})

        async with self._uow_factory() as uow:
            await uow.permission_sets.create(permission_set)
            await uow.permissions.replace_for_permission_set(permission_set.id, permissions)
            await uow.events.add(
                Event.record(
                    "PermissionSet",
                    EventType.CREATED,
                    permission_set.id,
                    member_id=actor.id,
                    data={
                        "site_id": str(site_id),
                        "name": permission_set.name,
                        "grants": describe_grants(permissions),
                    },
                )
            )

        logger.info(
            "permission_set_created",
            permission_set_id=str(permission_set.id),
            site_id=str(site_id),
            actor=actor.user_id,
        )
        return permission_set
