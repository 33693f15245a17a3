"""Permission set repository port."""

from typing import Protocol
from uuid import UUID

from forumgate.domain.entities import PermissionSet


class PermissionSetRepository(Protocol):
    """Port for permission set persistence."""

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None: ...

    async def is_in_use(self, permission_set_id: UUID) -> bool: ...

    async def create(self, permission_set: PermissionSet) -> PermissionSet: ...

    async def delete(self, permission_set_id: UUID) -> None: ...
