"""Event repository port."""

from typing import Protocol

from forumgate.domain.entities import Event


class EventRepository(Protocol):
    """Port for appending audit events."""

    async def add(self, event: Event) -> None: ...
