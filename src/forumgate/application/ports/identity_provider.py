"""Identity provider port - claims of the calling user."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class IdentityClaims:
    """Claims extracted from an access token."""

    user_id: str
    email: str | None = None
    username: str | None = None
    roles: list[str] = field(default_factory=list)


class IdentityProvider(Protocol):
    """Port for turning an access token into claims."""

    async def decode_token(self, token: str) -> IdentityClaims | None: ...
