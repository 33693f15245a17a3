"""Context service - current site, member and forums of a request."""

from uuid import UUID

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentForum, CurrentMember, CurrentSite
from forumgate.application.ports import CacheManager, IdentityProvider
from forumgate.domain.exceptions import NotFound
from forumgate.domain.value_objects import EffectivePermissionSet


class ContextService:
    """Resolves the request context the authorization core needs."""

    def __init__(
        self,
        unit_of_work_factory: type,
        cache_manager: CacheManager,
        identity_provider: IdentityProvider | None = None,
        *,
        default_site_name: str = "Default",
        admin_role_name: str = "Admin",
        guest_role_id: str = "guest",
        everyone_role_id: str = "everyone",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache_manager
        self._identity = identity_provider
        self._default_site_name = default_site_name
        self._admin_role_name = admin_role_name
        self._guest_role_id = guest_role_id
        self._everyone_role_id = everyone_role_id

    async def current_site(self, name: str | None = None) -> CurrentSite:
        """Get site by name (default site when omitted). Raises NotFound."""
        name = name or self._default_site_name
        return await self._cache.get_or_set(
            CacheKeys.current_site(name),
            lambda: self._load_site(name),
        )

    async def _load_site(self, name: str) -> CurrentSite:
        async with self._uow_factory() as uow:
            site = await uow.sites.get_by_name(name)
        if site is None:
            raise NotFound("Site", name)
        return CurrentSite(id=site.id, name=site.name, title=site.title)

    def guest(self) -> CurrentMember:
        """Unauthenticated caller."""
        return CurrentMember(
            roles=frozenset({self._guest_role_id, self._everyone_role_id}),
        )

    async def current_member(self, token: str | None = None) -> CurrentMember:
        """Resolve caller from an access token; guests when absent or invalid."""
        if not token or self._identity is None:
            return self.guest()

        claims = await self._identity.decode_token(token)
        if claims is None:
            return self.guest()

        roles = frozenset(claims.roles) | {self._everyone_role_id}
        is_admin = self._admin_role_name in claims.roles

        async with self._uow_factory() as uow:
            member = await uow.members.get_by_user_id(claims.user_id)

        # Authenticated user without a forum profile yet.
        if member is None:
            return CurrentMember(
                user_id=claims.user_id,
                display_name=claims.username,
                roles=roles,
                is_admin=is_admin,
            )

        return CurrentMember(
            id=member.id,
            user_id=member.user_id,
            display_name=member.display_name,
            roles=roles,
            is_suspended=member.is_suspended,
            is_admin=is_admin,
        )

    async def current_forums(self, site_id: UUID) -> tuple[CurrentForum, ...]:
        """Published forums of site with their effective permission sets."""
        return await self._cache.get_or_set(
            CacheKeys.current_forums(site_id),
            lambda: self._load_forums(site_id),
        )

    async def _load_forums(self, site_id: UUID) -> tuple[CurrentForum, ...]:
        async with self._uow_factory() as uow:
            refs = await uow.forums.list_permission_set_refs_by_site(site_id)
        return tuple(
            CurrentForum(
                id=ref.forum_id,
                permission_set_id=EffectivePermissionSet.resolve(
                    ref.forum_permission_set_id, ref.category_permission_set_id
                ).permission_set_id,
            )
            for ref in refs
        )
