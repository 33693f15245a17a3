"""Update permission set use case - replace role grants."""

from collections.abc import Iterable, Mapping
from uuid import UUID

import structlog

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember
from forumgate.application.ports import CacheManager
from forumgate.domain.entities import Event, Permission
from forumgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from forumgate.domain.value_objects import EventType, PermissionType

logger = structlog.get_logger()


class UpdatePermissionSetUseCase:
    """Replace the permission rows of a permission set."""

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
        permission_set_id: UUID,
        grants: Mapping[str, Iterable[str]],
    ) -> list[Permission]:
        """Replace grants (role id -> permission types). Actor must be admin.

        The permission set key is evicted after commit and before returning.
        """
        if not actor.is_admin:
            raise PermissionDenied("Only administrators can change permission sets")

        permissions = build_permissions(permission_set_id, grants)

        async with self._uow_factory() as uow:
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", permission_set_id)
            await uow.permissions.replace_for_permission_set(permission_set_id, permissions)
            await uow.events.add(
                Event.record(
                    "PermissionSet",
                    EventType.UPDATED,
                    permission_set_id,
                    member_id=actor.id,
                    data={"grants": describe_grants(permissions)},
                )
            )

        self._cache.remove(CacheKeys.permission_set(permission_set_id))
        logger.info(
            "permission_set_updated",
            permission_set_id=str(permission_set_id),
            grants=len(permissions),
            actor=actor.user_id,
        )
        return permissions


def build_permissions(
    permission_set_id: UUID, grants: Mapping[str, Iterable[str]]
) -> list[Permission]:
    """Turn role -> types grants into unique permission rows."""
    permissions: dict[tuple[str, PermissionType], Permission] = {}
    for role_id, types in grants.items():
        if not role_id:
            raise ValidationError("Role id must not be empty")
        for raw_type in types:
            try:
                permission_type = PermissionType(raw_type)
            except ValueError:
                raise ValidationError(f"Unknown permission type: {raw_type}") from None
            permissions[(role_id, permission_type)] = Permission(
                permission_set_id=permission_set_id,
                role_id=role_id,
                type=permission_type,
            )
    return list(permissions.values())


def describe_grants(permissions: Iterable[Permission]) -> dict[str, list[str]]:
    """Role id -> sorted permission types, as stored in event data."""
    grants: dict[str, list[str]] = {}
    for p in permissions:
        grants.setdefault(p.role_id, []).append(p.type.value)
    return {role_id: sorted(types) for role_id, types in sorted(grants.items())}
