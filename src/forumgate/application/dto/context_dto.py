"""Request context DTOs - current site, member and forums."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class CurrentSite:
    """Site serving the current request."""

    id: UUID
    name: str
    title: str


@dataclass(frozen=True)
class CurrentMember:
    """Caller identity as seen by the authorization core.

    Guests have no id and hold only the guest and everyone roles.
    """

    id: UUID | None = None
    user_id: str | None = None
    display_name: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)
    is_suspended: bool = False
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.id is not None


@dataclass(frozen=True)
class CurrentForum:
    """Published forum with its effective permission set."""

    id: UUID
    permission_set_id: UUID | None
