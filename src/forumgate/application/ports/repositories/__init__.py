"""Repository ports."""

from forumgate.application.ports.repositories.category_repository import (
    CategoryRepository,
)
from forumgate.application.ports.repositories.event_repository import EventRepository
from forumgate.application.ports.repositories.forum_repository import ForumRepository
from forumgate.application.ports.repositories.member_repository import MemberRepository
from forumgate.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from forumgate.application.ports.repositories.permission_set_repository import (
    PermissionSetRepository,
)
from forumgate.application.ports.repositories.post_repository import PostRepository
from forumgate.application.ports.repositories.site_repository import SiteRepository

__all__ = [
    "CategoryRepository",
    "EventRepository",
    "ForumRepository",
    "MemberRepository",
    "PermissionRepository",
    "PermissionSetRepository",
    "PostRepository",
    "SiteRepository",
]
