"""Domain entities."""

from forumgate.domain.entities.category import Category
from forumgate.domain.entities.event import Event
from forumgate.domain.entities.forum import Forum
from forumgate.domain.entities.member import Member
from forumgate.domain.entities.permission import Permission
from forumgate.domain.entities.permission_set import PermissionSet
from forumgate.domain.entities.post import Reply, Topic
from forumgate.domain.entities.site import Site

__all__ = [
    "Category",
    "Event",
    "Forum",
    "Member",
    "Permission",
    "PermissionSet",
    "Reply",
    "Site",
    "Topic",
]
