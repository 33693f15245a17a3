"""Event entity - audit record of an administrative change."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from forumgate.domain.value_objects import EventType


@dataclass
class Event:
    """Event - who changed which target, and how."""

    id: UUID
    timestamp: datetime
    target_id: UUID
    target_type: str
    type: EventType
    member_id: UUID | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def record(
        cls,
        target_type: str,
        event_type: EventType,
        target_id: UUID,
        member_id: UUID | None = None,
        data: dict[str, Any] | None = None,
    ) -> "Event":
        """New event stamped with a fresh id and the current UTC time."""
        return cls(
            id=uuid4(),
            timestamp=datetime.now(UTC),
            target_id=target_id,
            target_type=target_type,
            type=event_type,
            member_id=member_id,
            data=data,
        )
