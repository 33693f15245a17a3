"""PostgreSQL forum repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from forumgate.application.dto import ForumPermissionRef
from forumgate.domain.entities import Forum
from forumgate.domain.value_objects import StatusType

_PERMISSION_SET_REFS_SELECT = (
    "SELECT f.id, f.permission_set_id, c.permission_set_id "
    "FROM forum f JOIN category c ON c.id = f.category_id "
)


class PostgresForumRepository:
    """Forum repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, site_id: UUID, forum_id: UUID) -> Forum | None:
        """Get non-deleted forum of site by id."""
        cur = await self._conn.execute(
            "SELECT f.id, f.category_id, f.name, f.slug, f.status, f.permission_set_id "
            "FROM forum f JOIN category c ON c.id = f.category_id "
            "WHERE f.id = %s AND c.site_id = %s AND f.status <> %s",
            (forum_id, site_id, StatusType.DELETED.value),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Forum(
            id=r[0],
            category_id=r[1],
            name=r[2],
            slug=r[3],
            status=StatusType(r[4]),
            permission_set_id=r[5],
        )

    async def get_permission_set_refs(
        self, site_id: UUID, forum_id: UUID
    ) -> ForumPermissionRef | None:
        """Get forum and category permission set ids for a forum of site."""
        cur = await self._conn.execute(
            _PERMISSION_SET_REFS_SELECT
            + "WHERE f.id = %s AND c.site_id = %s AND f.status <> %s",
            (forum_id, site_id, StatusType.DELETED.value),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return ForumPermissionRef(
            forum_id=r[0],
            forum_permission_set_id=r[1],
            category_permission_set_id=r[2],
        )

    async def list_permission_set_refs_by_site(
        self, site_id: UUID
    ) -> list[ForumPermissionRef]:
        """List permission set ids of published forums of site."""
        cur = await self._conn.execute(
            _PERMISSION_SET_REFS_SELECT
            + "WHERE c.site_id = %s AND f.status = %s "
            "ORDER BY c.sort_order, f.sort_order",
            (site_id, StatusType.PUBLISHED.value),
        )
        rows = await cur.fetchall()
        return [
            ForumPermissionRef(
                forum_id=r[0],
                forum_permission_set_id=r[1],
                category_permission_set_id=r[2],
            )
            for r in rows
        ]

    async def update_permission_set(
        self, forum_id: UUID, permission_set_id: UUID | None
    ) -> None:
        """Set or clear the forum's own permission set."""
        await self._conn.execute(
            "UPDATE forum SET permission_set_id = %s WHERE id = %s",
            (permission_set_id, forum_id),
        )

    async def move_to_category(self, forum_id: UUID, category_id: UUID) -> None:
        """Move forum to another category."""
        await self._conn.execute(
            "UPDATE forum SET category_id = %s WHERE id = %s",
            (category_id, forum_id),
        )
