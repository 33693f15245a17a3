"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from forumgate.infrastructure.persistence.postgres.category_repository import (
    PostgresCategoryRepository,
)
from forumgate.infrastructure.persistence.postgres.event_repository import (
    PostgresEventRepository,
)
from forumgate.infrastructure.persistence.postgres.forum_repository import (
    PostgresForumRepository,
)
from forumgate.infrastructure.persistence.postgres.member_repository import (
    PostgresMemberRepository,
)
from forumgate.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from forumgate.infrastructure.persistence.postgres.permission_set_repository import (
    PostgresPermissionSetRepository,
)
from forumgate.infrastructure.persistence.postgres.post_repository import (
    PostgresPostRepository,
)
from forumgate.infrastructure.persistence.postgres.site_repository import (
    PostgresSiteRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._sites = PostgresSiteRepository(self._conn)
        self._categories = PostgresCategoryRepository(self._conn)
        self._forums = PostgresForumRepository(self._conn)
        self._permission_sets = PostgresPermissionSetRepository(self._conn)
        self._permissions = PostgresPermissionRepository(self._conn)
        self._members = PostgresMemberRepository(self._conn)
        self._posts = PostgresPostRepository(self._conn)
        self._events = PostgresEventRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def sites(self) -> PostgresSiteRepository:
        return self._sites

    @property
    def categories(self) -> PostgresCategoryRepository:
        return self._categories

    @property
    def forums(self) -> PostgresForumRepository:
        return self._forums

    @property
    def permission_sets(self) -> PostgresPermissionSetRepository:
        return self._permission_sets

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def members(self) -> PostgresMemberRepository:
        return self._members

    @property
    def posts(self) -> PostgresPostRepository:
        return self._posts

    @property
    def events(self) -> PostgresEventRepository:
        return self._events

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
