"""Category entity (forum group)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Category:
    """Category - groups forums and supplies their default permission set."""

    id: UUID
    site_id: UUID
    name: str
    permission_set_id: UUID | None
    sort_order: int = 0
