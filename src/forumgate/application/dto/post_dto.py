"""Post ownership lookups."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PostInfo:
    """Owner and lock state of a non-deleted topic or reply."""

    member_id: UUID
    locked: bool = False
