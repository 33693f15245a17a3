"""Category repository port."""

from typing import Protocol
from uuid import UUID

from forumgate.domain.entities import Category


class CategoryRepository(Protocol):
    """Port for category persistence."""

    async def get_by_id(self, site_id: UUID, category_id: UUID) -> Category | None: ...

    async def update(self, category: Category) -> None: ...
