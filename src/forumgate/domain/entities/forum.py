"""Forum entity."""

from dataclasses import dataclass
from uuid import UUID

from forumgate.domain.value_objects import StatusType


@dataclass
class Forum:
    """Forum - belongs to a category, may override its permission set."""

    id: UUID
    category_id: UUID
    name: str
    slug: str
    status: StatusType = StatusType.PUBLISHED
    permission_set_id: UUID | None = None
