"""Site repository port."""

from typing import Protocol

from forumgate.domain.entities import Site


class SiteRepository(Protocol):
    """Port for site lookups."""

    async def get_by_name(self, name: str) -> Site | None: ...
