"""Keycloak OIDC provider - access token to identity claims."""

import structlog
from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from forumgate.application.ports import IdentityClaims

logger = structlog.get_logger()


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts user id and roles.

    Role ids used in permission rows are the Keycloak role names: realm
    roles plus the client roles of this client.
    """

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._client_id = client_id
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> IdentityClaims | None:
        """Introspect token, return claims or None when inactive or invalid."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning("token_introspection_failed", error=str(e))
            return None
        if not token_info.get("active"):
            return None
        return claims_from_token_info(token_info, self._client_id)


def claims_from_token_info(token_info: dict, client_id: str) -> IdentityClaims:
    """Map an introspection response to identity claims."""
    roles = list(token_info.get("realm_access", {}).get("roles", []))
    client_access = token_info.get("resource_access", {}).get(client_id, {})
    for role in client_access.get("roles", []):
        if role not in roles:
            roles.append(role)
    return IdentityClaims(
        user_id=token_info.get("sub", ""),
        email=token_info.get("email"),
        username=token_info.get("preferred_username"),
        roles=roles,
    )
