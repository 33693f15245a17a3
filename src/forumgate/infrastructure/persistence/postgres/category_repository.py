"""PostgreSQL category repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from forumgate.domain.entities import Category
from forumgate.domain.value_objects import StatusType


class PostgresCategoryRepository:
    """Category repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, site_id: UUID, category_id: UUID) -> Category | None:
        """Get category of site by id."""
        cur = await self._conn.execute(
            "SELECT id, site_id, name, permission_set_id, sort_order "
            "FROM category WHERE id = %s AND site_id = %s AND status <> %s",
            (category_id, site_id, StatusType.DELETED.value),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Category(
            id=r[0],
            site_id=r[1],
            name=r[2],
            permission_set_id=r[3],
            sort_order=r[4],
        )

    async def update(self, category: Category) -> None:
        """Update category name and permission set."""
        await self._conn.execute(
            "UPDATE category SET name = %s, permission_set_id = %s WHERE id = %s",
            (category.name, category.permission_set_id, category.id),
        )
