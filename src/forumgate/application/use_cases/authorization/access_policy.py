"""Access policy - composes raw permission checks with member guards."""

from collections.abc import Iterable
from uuid import UUID

from forumgate.application.dto import CurrentMember, PermissionModel, TopicPermissions
from forumgate.application.ports import SecurityService
from forumgate.domain.value_objects import PermissionType


class AccessPolicy:
    """Rules for one member against one forum's resolved permissions.

    Moderate overrides ownership, lock and suspension for edit and delete,
    but suspension still blocks start, reply, pin and lock.
    """

    def __init__(
        self,
        security_service: SecurityService,
        member: CurrentMember,
        permissions: Iterable[PermissionModel],
    ) -> None:
        self._security = security_service
        self._member = member
        self._permissions = frozenset(permissions)

    def has(self, permission_type: PermissionType) -> bool:
        return self._security.has_permission(
            self._member, permission_type, self._permissions
        )

    def is_owner(self, owner_id: UUID) -> bool:
        return self._member.id is not None and self._member.id == owner_id

    def can_read(self) -> bool:
        return self.has(PermissionType.READ)

    def can_start(self) -> bool:
        return self.has(PermissionType.START) and not self._member.is_suspended

    def can_reply(self) -> bool:
        return self.has(PermissionType.REPLY) and not self._member.is_suspended

    def can_moderate(self) -> bool:
        """Pin and lock."""
        return self.has(PermissionType.MODERATE) and not self._member.is_suspended

    def can_edit(self, owner_id: UUID, locked: bool = False) -> bool:
        if self.has(PermissionType.MODERATE):
            return True
        return (
            self.has(PermissionType.EDIT)
            and self.is_owner(owner_id)
            and not locked
            and not self._member.is_suspended
        )

    def can_delete(self, owner_id: UUID) -> bool:
        if self.has(PermissionType.MODERATE):
            return True
        return self.has(PermissionType.DELETE) and self.is_owner(owner_id)

    def topic_permissions(self) -> TopicPermissions:
        """Flags for rendering a topic page, before any post is chosen."""
        not_suspended = not self._member.is_suspended
        return TopicPermissions(
            can_read=self.can_read(),
            can_reply=self.can_reply(),
            can_edit=self.has(PermissionType.EDIT) and not_suspended,
            can_delete=self.has(PermissionType.DELETE) and not_suspended,
            can_moderate=self.can_moderate(),
        )
