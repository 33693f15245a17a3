"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from forumgate.application.ports.repositories import (
    CategoryRepository,
    EventRepository,
    ForumRepository,
    MemberRepository,
    PermissionRepository,
    PermissionSetRepository,
    PostRepository,
    SiteRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def sites(self) -> SiteRepository: ...

    @property
    def categories(self) -> CategoryRepository: ...

    @property
    def forums(self) -> ForumRepository: ...

    @property
    def permission_sets(self) -> PermissionSetRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def members(self) -> MemberRepository: ...

    @property
    def posts(self) -> PostRepository: ...

    @property
    def events(self) -> EventRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
