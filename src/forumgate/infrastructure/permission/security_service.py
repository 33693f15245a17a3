"""Security service implementation - evaluates permission models."""

from collections.abc import Iterable

from forumgate.application.dto import CurrentMember, PermissionModel
from forumgate.domain.value_objects import PermissionType


class DefaultSecurityService:
    """Checks a member's roles against resolved permission models."""

    def has_permission(
        self,
        member: CurrentMember,
        permission_type: PermissionType,
        permissions: Iterable[PermissionModel],
    ) -> bool:
        """Check if member may perform permission_type.

        Admins are allowed unconditionally, before any row is looked at.
        Otherwise a grant must exist for one of the member's roles; no
        matching row means denied.
        """
        if member.is_admin:
            return True

        return any(
            permission.type == permission_type and permission.role_id in member.roles
            for permission in permissions
        )
