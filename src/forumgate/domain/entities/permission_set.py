"""Permission set entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class PermissionSet:
    """Permission set - named bundle of role grants."""

    id: UUID
    site_id: UUID
    name: str
