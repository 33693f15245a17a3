"""Authorize action use case."""

from uuid import UUID

import structlog

from forumgate.application.dto import CurrentMember, PostInfo, TopicPermissions
from forumgate.application.ports import SecurityService
from forumgate.application.use_cases.authorization.access_policy import AccessPolicy
from forumgate.application.use_cases.permission.build_permission_models import (
    PermissionModelBuilder,
)
from forumgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from forumgate.domain.value_objects import ForumAction

logger = structlog.get_logger()


class AuthorizeActionUseCase:
    """Decide whether a member may perform an action in a forum."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_model_builder: PermissionModelBuilder,
        security_service: SecurityService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._builder = permission_model_builder
        self._security = security_service

    async def execute(
        self,
        site_id: UUID,
        forum_id: UUID,
        member: CurrentMember,
        action: ForumAction,
        topic_id: UUID | None = None,
        reply_id: UUID | None = None,
    ) -> bool:
        """Return True when allowed.

        Denial is a False result, not an exception. Raises NotFound for an
        unknown forum, or for an unknown topic/reply on edit and delete.
        """
        policy = await self.policy_for(site_id, forum_id, member)

        if action == ForumAction.READ:
            allowed = policy.can_read()
        elif action == ForumAction.START:
            allowed = policy.can_start()
        elif action == ForumAction.REPLY:
            allowed = policy.can_reply()
        elif action in (ForumAction.PIN, ForumAction.LOCK):
            allowed = policy.can_moderate()
        elif action in (ForumAction.EDIT, ForumAction.DELETE):
            post = await self._get_post_info(site_id, forum_id, topic_id, reply_id)
            if action == ForumAction.EDIT:
                allowed = policy.can_edit(post.member_id, post.locked)
            else:
                allowed = policy.can_delete(post.member_id)
        else:
            raise ValidationError(f"Unknown action: {action}")

        if not allowed:
            logger.warning(
                "unauthorized_access",
                action=str(action),
                site_id=str(site_id),
                forum_id=str(forum_id),
                topic_id=str(topic_id) if topic_id else None,
                reply_id=str(reply_id) if reply_id else None,
                member_id=str(member.id) if member.id else None,
                user_id=member.user_id,
            )
        return allowed

    async def require(
        self,
        site_id: UUID,
        forum_id: UUID,
        member: CurrentMember,
        action: ForumAction,
        topic_id: UUID | None = None,
        reply_id: UUID | None = None,
    ) -> None:
        """Like execute, but raise PermissionDenied when not allowed."""
        allowed = await self.execute(
            site_id, forum_id, member, action, topic_id=topic_id, reply_id=reply_id
        )
        if not allowed:
            raise PermissionDenied(f"Member may not {action} in forum {forum_id}")

    async def permissions_for_topic(
        self, site_id: UUID, forum_id: UUID, member: CurrentMember
    ) -> TopicPermissions:
        """Flags for a topic page of the forum."""
        policy = await self.policy_for(site_id, forum_id, member)
        return policy.topic_permissions()

    async def policy_for(
        self, site_id: UUID, forum_id: UUID, member: CurrentMember
    ) -> AccessPolicy:
        permissions = await self._builder.build_permission_models_by_forum_id(
            site_id, forum_id
        )
        return AccessPolicy(self._security, member, permissions)

    async def _get_post_info(
        self,
        site_id: UUID,
        forum_id: UUID,
        topic_id: UUID | None,
        reply_id: UUID | None,
    ) -> PostInfo:
        if topic_id is None:
            raise ValidationError("topic_id is required to edit or delete a post")

        async with self._uow_factory() as uow:
            if reply_id is None:
                post = await uow.posts.get_topic_info(site_id, forum_id, topic_id)
            else:
                post = await uow.posts.get_reply_info(
                    site_id, forum_id, topic_id, reply_id
                )

        if post is None:
            if reply_id is None:
                raise NotFound("Topic", topic_id)
            raise NotFound("Reply", reply_id)
        return post
