"""PostgreSQL member repository implementation."""

from psycopg import AsyncConnection

from forumgate.domain.entities import Member
from forumgate.domain.value_objects import StatusType


class PostgresMemberRepository:
    """Member repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_user_id(self, user_id: str) -> Member | None:
        """Get member by identity provider user id."""
        cur = await self._conn.execute(
            "SELECT id, user_id, email, display_name, status FROM member WHERE user_id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Member(
            id=r[0],
            user_id=r[1],
            email=r[2],
            display_name=r[3],
            status=StatusType(r[4]),
        )
