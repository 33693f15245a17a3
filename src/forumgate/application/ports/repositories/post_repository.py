"""Post repository port - ownership lookups only."""

from typing import Protocol
from uuid import UUID

from forumgate.application.dto import PostInfo


class PostRepository(Protocol):
    """Port for topic and reply ownership."""

    async def get_topic_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID
    ) -> PostInfo | None: ...

    async def get_reply_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID, reply_id: UUID
    ) -> PostInfo | None: ...
