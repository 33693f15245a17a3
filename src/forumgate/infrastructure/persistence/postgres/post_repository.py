"""PostgreSQL post repository implementation - ownership lookups."""

from uuid import UUID

from psycopg import AsyncConnection

from forumgate.application.dto import PostInfo
from forumgate.domain.value_objects import StatusType


class PostgresPostRepository:
    """Post repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_topic_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID
    ) -> PostInfo | None:
        """Get owner and lock state of a non-deleted topic in forum of site."""
        cur = await self._conn.execute(
            "SELECT t.member_id, t.locked FROM topic t "
            "JOIN forum f ON f.id = t.forum_id "
            "JOIN category c ON c.id = f.category_id "
            "WHERE t.id = %s AND t.forum_id = %s AND c.site_id = %s AND t.status <> %s",
            (topic_id, forum_id, site_id, StatusType.DELETED.value),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return PostInfo(member_id=r[0], locked=r[1])

    async def get_reply_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID, reply_id: UUID
    ) -> PostInfo | None:
        """Get owner of a non-deleted reply under a non-deleted topic of forum of site."""
        cur = await self._conn.execute(
            "SELECT r.member_id FROM reply r "
            "JOIN topic t ON t.id = r.topic_id "
            "JOIN forum f ON f.id = t.forum_id "
            "JOIN category c ON c.id = f.category_id "
            "WHERE r.id = %s AND r.topic_id = %s AND t.forum_id = %s "
            "AND c.site_id = %s AND r.status <> %s AND t.status <> %s",
            (
                reply_id,
                topic_id,
                forum_id,
                site_id,
                StatusType.DELETED.value,
                StatusType.DELETED.value,
            ),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return PostInfo(member_id=r[0])
