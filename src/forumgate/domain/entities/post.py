"""Topic and reply entities."""

from dataclasses import dataclass
from uuid import UUID

from forumgate.domain.value_objects import StatusType


@dataclass
class Topic:
    """Topic - opening post of a thread."""

    id: UUID
    forum_id: UUID
    member_id: UUID
    title: str
    status: StatusType = StatusType.PUBLISHED
    locked: bool = False
    pinned: bool = False


@dataclass
class Reply:
    """Reply - post inside a topic."""

    id: UUID
    topic_id: UUID
    member_id: UUID
    status: StatusType = StatusType.PUBLISHED
