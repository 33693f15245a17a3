"""PostgreSQL permission set repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from forumgate.domain.entities import PermissionSet


class PostgresPermissionSetRepository:
    """Permission set repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None:
        """Get permission set by id."""
        cur = await self._conn.execute(
            "SELECT id, site_id, name FROM permission_set WHERE id = %s",
            (permission_set_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return PermissionSet(id=r[0], site_id=r[1], name=r[2])

    async def is_in_use(self, permission_set_id: UUID) -> bool:
        """Check if any category or forum references the permission set."""
        cur = await self._conn.execute(
            "SELECT EXISTS (SELECT 1 FROM category WHERE permission_set_id = %s) "
            "OR EXISTS (SELECT 1 FROM forum WHERE permission_set_id = %s)",
            (permission_set_id, permission_set_id),
        )
        r = await cur.fetchone()
        return bool(r and r[0])

    async def create(self, permission_set: PermissionSet) -> PermissionSet:
        """Create permission set."""
        await self._conn.execute(
            "INSERT INTO permission_set (id, site_id, name) VALUES (%s, %s, %s)",
            (permission_set.id, permission_set.site_id, permission_set.name),
        )
        return permission_set

    async def delete(self, permission_set_id: UUID) -> None:
        """Delete permission set and its permissions."""
        await self._conn.execute(
            "DELETE FROM permission WHERE permission_set_id = %s",
            (permission_set_id,),
        )
        await self._conn.execute(
            "DELETE FROM permission_set WHERE id = %s",
            (permission_set_id,),
        )
