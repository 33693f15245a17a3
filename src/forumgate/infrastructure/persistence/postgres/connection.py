"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from forumgate.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must await open_pool()
    before the first unit of work.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
        open=False,
    )


async def open_pool(pool: AsyncConnectionPool) -> None:
    """Open pool and wait until min_size connections are ready."""
    await pool.open(wait=True)


async def close_pool(pool: AsyncConnectionPool) -> None:
    await pool.close()
