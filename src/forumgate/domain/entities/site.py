"""Site entity - tenant root."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Site:
    """Site - a tenant owning categories and forums."""

    id: UUID
    name: str
    title: str
