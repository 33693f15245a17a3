"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from forumgate.domain.entities import Permission
from forumgate.domain.value_objects import PermissionType


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_permission_set(self, permission_set_id: UUID) -> list[Permission]:
        """List permission rows of a permission set."""
        cur = await self._conn.execute(
            "SELECT permission_set_id, role_id, type FROM permission "
            "WHERE permission_set_id = %s",
            (permission_set_id,),
        )
        rows = await cur.fetchall()
        return [
            Permission(permission_set_id=r[0], role_id=r[1], type=PermissionType(r[2]))
            for r in rows
        ]

    async def replace_for_permission_set(
        self, permission_set_id: UUID, permissions: list[Permission]
    ) -> None:
        """Replace all permission rows of a permission set."""
        await self._conn.execute(
            "DELETE FROM permission WHERE permission_set_id = %s",
            (permission_set_id,),
        )
        if not permissions:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO permission (permission_set_id, role_id, type) "
                "VALUES (%s, %s, %s)",
                [(p.permission_set_id, p.role_id, p.type.value) for p in permissions],
            )
