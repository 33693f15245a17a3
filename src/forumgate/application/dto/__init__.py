"""Application DTOs."""

from forumgate.application.dto.context_dto import (
    CurrentForum,
    CurrentMember,
    CurrentSite,
)
from forumgate.application.dto.permission_dto import (
    ForumPermissionRef,
    PermissionModel,
    TopicPermissions,
)
from forumgate.application.dto.post_dto import PostInfo

__all__ = [
    "CurrentForum",
    "CurrentMember",
    "CurrentSite",
    "ForumPermissionRef",
    "PermissionModel",
    "PostInfo",
    "TopicPermissions",
]
