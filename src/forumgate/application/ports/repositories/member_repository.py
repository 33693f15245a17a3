"""Member repository port."""

from typing import Protocol

from forumgate.domain.entities import Member


class MemberRepository(Protocol):
    """Port for member lookups."""

    async def get_by_user_id(self, user_id: str) -> Member | None: ...
