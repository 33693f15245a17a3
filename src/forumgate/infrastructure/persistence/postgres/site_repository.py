"""PostgreSQL site repository implementation."""

from psycopg import AsyncConnection

from forumgate.domain.entities import Site


class PostgresSiteRepository:
    """Site repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_name(self, name: str) -> Site | None:
        """Get site by name."""
        cur = await self._conn.execute(
            "SELECT id, name, title FROM site WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Site(id=r[0], name=r[1], title=r[2])
