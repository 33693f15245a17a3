"""Permission model DTOs passed between builder and evaluator."""

from dataclasses import dataclass
from uuid import UUID

from forumgate.domain.value_objects import PermissionType


@dataclass(frozen=True)
class PermissionModel:
    """One (role, action) grant applicable to a forum."""

    role_id: str
    type: PermissionType


@dataclass(frozen=True)
class ForumPermissionRef:
    """Permission set ids of a forum and of its category, as plain ids."""

    forum_id: UUID
    forum_permission_set_id: UUID | None
    category_permission_set_id: UUID | None


@dataclass(frozen=True)
class TopicPermissions:
    """Flags shown on a topic page."""

    can_read: bool
    can_reply: bool
    can_edit: bool
    can_delete: bool
    can_moderate: bool
