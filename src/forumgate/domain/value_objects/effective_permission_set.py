"""Override-or-default resolution of a forum's permission set."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class PermissionSetSource(StrEnum):
    """Where the effective permission set of a forum comes from."""

    FORUM = "forum"
    CATEGORY = "category"
    NONE = "none"


@dataclass(frozen=True)
class EffectivePermissionSet:
    """Permission set actually governing a forum.

    A forum's own permission set overrides its category's. Inheritance is a
    single level: the category is the only fallback.
    """

    source: PermissionSetSource
    permission_set_id: UUID | None = None

    @classmethod
    def resolve(
        cls,
        forum_permission_set_id: UUID | None,
        category_permission_set_id: UUID | None,
    ) -> "EffectivePermissionSet":
        """Pick the forum override first, then the category default."""
        if forum_permission_set_id is not None:
            return cls(PermissionSetSource.FORUM, forum_permission_set_id)
        if category_permission_set_id is not None:
            return cls(PermissionSetSource.CATEGORY, category_permission_set_id)
        return cls(PermissionSetSource.NONE)

    @property
    def is_resolved(self) -> bool:
        return self.permission_set_id is not None
