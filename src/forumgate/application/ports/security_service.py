"""Security service port - permission evaluation."""

from collections.abc import Iterable
from typing import Protocol

from forumgate.application.dto import CurrentMember, PermissionModel
from forumgate.domain.value_objects import PermissionType


class SecurityService(Protocol):
    """Port for deciding whether a member holds a permission."""

    def has_permission(
        self,
        member: CurrentMember,
        permission_type: PermissionType,
        permissions: Iterable[PermissionModel],
    ) -> bool: ...
