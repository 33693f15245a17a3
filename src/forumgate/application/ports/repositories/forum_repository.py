"""Forum repository port."""

from typing import Protocol
from uuid import UUID

from forumgate.application.dto import ForumPermissionRef
from forumgate.domain.entities import Forum


class ForumRepository(Protocol):
    """Port for forum lookups and permission set assignment."""

    async def get_by_id(self, site_id: UUID, forum_id: UUID) -> Forum | None: ...

    async def get_permission_set_refs(
        self, site_id: UUID, forum_id: UUID
    ) -> ForumPermissionRef | None: ...

    async def list_permission_set_refs_by_site(
        self, site_id: UUID
    ) -> list[ForumPermissionRef]: ...

    async def update_permission_set(
        self, forum_id: UUID, permission_set_id: UUID | None
    ) -> None: ...

    async def move_to_category(self, forum_id: UUID, category_id: UUID) -> None: ...
