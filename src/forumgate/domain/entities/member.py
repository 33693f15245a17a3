"""Member entity."""

from dataclasses import dataclass
from uuid import UUID

from forumgate.domain.value_objects import StatusType


@dataclass
class Member:
    """Member - forum profile linked to an identity provider user."""

    id: UUID
    user_id: str
    email: str
    display_name: str
    status: StatusType = StatusType.ACTIVE

    @property
    def is_suspended(self) -> bool:
        return self.status == StatusType.SUSPENDED
