"""Permission repository port."""

from typing import Protocol
from uuid import UUID

from forumgate.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission rows of a permission set."""

    async def list_by_permission_set(self, permission_set_id: UUID) -> list[Permission]: ...

    async def replace_for_permission_set(
        self, permission_set_id: UUID, permissions: list[Permission]
    ) -> None: ...
