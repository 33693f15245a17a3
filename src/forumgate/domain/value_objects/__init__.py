"""Domain value objects."""

from forumgate.domain.value_objects.effective_permission_set import (
    EffectivePermissionSet,
    PermissionSetSource,
)
from forumgate.domain.value_objects.event_type import EventType
from forumgate.domain.value_objects.forum_action import ForumAction
from forumgate.domain.value_objects.permission_type import PermissionType
from forumgate.domain.value_objects.status_type import StatusType

__all__ = [
    "EffectivePermissionSet",
    "EventType",
    "ForumAction",
    "PermissionSetSource",
    "PermissionType",
    "StatusType",
]
