"""Permission entity - role grant inside a permission set."""

from dataclasses import dataclass
from uuid import UUID

from forumgate.domain.value_objects import PermissionType


@dataclass(frozen=True)
class Permission:
    """Permission - role may perform type within permission set.

    Keyed by (permission_set_id, role_id, type). A row means granted;
    there are no deny rows.
    """

    permission_set_id: UUID
    role_id: str
    type: PermissionType
