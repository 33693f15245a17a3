"""PostgreSQL event repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from forumgate.domain.entities import Event


class PostgresEventRepository:
    """Event repository implementation - append only."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def add(self, event: Event) -> None:
        """Insert event in the current transaction."""
        await self._conn.execute(
            "INSERT INTO event (id, time_stamp, target_id, target_type, type, member_id, data) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                event.id,
                event.timestamp,
                event.target_id,
                event.target_type,
                event.type.value,
                event.member_id,
                Jsonb(event.data) if event.data is not None else None,
            ),
        )
