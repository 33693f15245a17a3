"""Pytest fixtures for forumgate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from uuid import UUID, uuid4

import pytest

from forumgate.application.dto import CurrentMember, ForumPermissionRef, PostInfo
from forumgate.domain.entities import (
    Category,
    Event,
    Forum,
    Member,
    Permission,
    PermissionSet,
    Reply,
    Site,
    Topic,
)
from forumgate.domain.value_objects import PermissionType, StatusType
from forumgate.infrastructure.cache.memory_cache import InMemoryCacheManager
from forumgate.infrastructure.permission.security_service import DefaultSecurityService


# --- Fake repositories ---


class FakeStore:
    """Shared in-memory tables behind the fake repositories."""

    def __init__(self) -> None:
        self.sites: dict[UUID, Site] = {}
        self.categories: dict[UUID, Category] = {}
        self.forums: dict[UUID, Forum] = {}
        self.permission_sets: dict[UUID, PermissionSet] = {}
        self.permissions: set[Permission] = set()
        self.members: dict[UUID, Member] = {}
        self.topics: dict[UUID, Topic] = {}
        self.replies: dict[UUID, Reply] = {}
        self.events: list[Event] = []
        self.calls: dict[str, int] = {}

    def count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1


class FakeSiteRepository:
    """In-memory site repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_by_name(self, name: str) -> Site | None:
        self._store.count("sites.get_by_name")
        for site in self._store.sites.values():
            if site.name == name:
                return site
        return None


class FakeCategoryRepository:
    """In-memory category repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_by_id(self, site_id: UUID, category_id: UUID) -> Category | None:
        category = self._store.categories.get(category_id)
        if not category or category.site_id != site_id:
            return None
        return replace(category)

    async def update(self, category: Category) -> None:
        self._store.categories[category.id] = replace(category)


class FakeForumRepository:
    """In-memory forum repository, joined to categories by id."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def _in_site(self, forum: Forum, site_id: UUID) -> Category | None:
        category = self._store.categories.get(forum.category_id)
        if not category or category.site_id != site_id:
            return None
        return category

    async def get_by_id(self, site_id: UUID, forum_id: UUID) -> Forum | None:
        forum = self._store.forums.get(forum_id)
        if not forum or forum.status == StatusType.DELETED:
            return None
        if not self._in_site(forum, site_id):
            return None
        return replace(forum)

    async def get_permission_set_refs(
        self, site_id: UUID, forum_id: UUID
    ) -> ForumPermissionRef | None:
        self._store.count("forums.get_permission_set_refs")
        forum = self._store.forums.get(forum_id)
        if not forum or forum.status == StatusType.DELETED:
            return None
        category = self._in_site(forum, site_id)
        if not category:
            return None
        return ForumPermissionRef(
            forum_id=forum.id,
            forum_permission_set_id=forum.permission_set_id,
            category_permission_set_id=category.permission_set_id,
        )

    async def list_permission_set_refs_by_site(
        self, site_id: UUID
    ) -> list[ForumPermissionRef]:
        self._store.count("forums.list_permission_set_refs_by_site")
        refs = []
        for forum in self._store.forums.values():
            category = self._in_site(forum, site_id)
            if not category or forum.status != StatusType.PUBLISHED:
                continue
            refs.append(
                ForumPermissionRef(
                    forum_id=forum.id,
                    forum_permission_set_id=forum.permission_set_id,
                    category_permission_set_id=category.permission_set_id,
                )
            )
        return refs

    async def update_permission_set(
        self, forum_id: UUID, permission_set_id: UUID | None
    ) -> None:
        forum = self._store.forums[forum_id]
        self._store.forums[forum_id] = replace(forum, permission_set_id=permission_set_id)

    async def move_to_category(self, forum_id: UUID, category_id: UUID) -> None:
        forum = self._store.forums[forum_id]
        self._store.forums[forum_id] = replace(forum, category_id=category_id)


class FakePermissionSetRepository:
    """In-memory permission set repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None:
        return self._store.permission_sets.get(permission_set_id)

    async def is_in_use(self, permission_set_id: UUID) -> bool:
        return any(
            c.permission_set_id == permission_set_id
            for c in self._store.categories.values()
        ) or any(
            f.permission_set_id == permission_set_id
            for f in self._store.forums.values()
        )

    async def create(self, permission_set: PermissionSet) -> PermissionSet:
        self._store.permission_sets[permission_set.id] = permission_set
        return permission_set

    async def delete(self, permission_set_id: UUID) -> None:
        self._store.permission_sets.pop(permission_set_id, None)
        self._store.permissions = {
            p for p in self._store.permissions if p.permission_set_id != permission_set_id
        }


class FakePermissionRepository:
    """In-memory permission repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def list_by_permission_set(self, permission_set_id: UUID) -> list[Permission]:
        self._store.count("permissions.list_by_permission_set")
        return [
            p for p in self._store.permissions if p.permission_set_id == permission_set_id
        ]

    async def replace_for_permission_set(
        self, permission_set_id: UUID, permissions: list[Permission]
    ) -> None:
        kept = {
            p for p in self._store.permissions if p.permission_set_id != permission_set_id
        }
        self._store.permissions = kept | set(permissions)


class FakeMemberRepository:
    """In-memory member repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_by_user_id(self, user_id: str) -> Member | None:
        for member in self._store.members.values():
            if member.user_id == user_id:
                return member
        return None


class FakePostRepository:
    """In-memory post repository."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def _topic(self, site_id: UUID, forum_id: UUID, topic_id: UUID) -> Topic | None:
        topic = self._store.topics.get(topic_id)
        if not topic or topic.forum_id != forum_id or topic.status == StatusType.DELETED:
            return None
        forum = self._store.forums.get(forum_id)
        category = self._store.categories.get(forum.category_id) if forum else None
        if not category or category.site_id != site_id:
            return None
        return topic

    async def get_topic_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID
    ) -> PostInfo | None:
        topic = self._topic(site_id, forum_id, topic_id)
        if not topic:
            return None
        return PostInfo(member_id=topic.member_id, locked=topic.locked)

    async def get_reply_info(
        self, site_id: UUID, forum_id: UUID, topic_id: UUID, reply_id: UUID
    ) -> PostInfo | None:
        if not self._topic(site_id, forum_id, topic_id):
            return None
        reply = self._store.replies.get(reply_id)
        if not reply or reply.topic_id != topic_id or reply.status == StatusType.DELETED:
            return None
        return PostInfo(member_id=reply.member_id)


class FakeEventRepository:
    """In-memory append-only event log."""

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def add(self, event: Event) -> None:
        self._store.events.append(event)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories over one store."""

    def __init__(self, store: FakeStore | None = None) -> None:
        self.store = store or FakeStore()
        self.sites = FakeSiteRepository(self.store)
        self.categories = FakeCategoryRepository(self.store)
        self.forums = FakeForumRepository(self.store)
        self.permission_sets = FakePermissionSetRepository(self.store)
        self.permissions = FakePermissionRepository(self.store)
        self.members = FakeMemberRepository(self.store)
        self.posts = FakePostRepository(self.store)
        self.events = FakeEventRepository(self.store)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(store: FakeStore):
    """Factory yielding a FakeUnitOfWork over the given store per call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield FakeUnitOfWork(store)

    return _factory


# --- Forum fixture data ---


@dataclass
class ForumWorld:
    """Default site with one category, two forums and a few members."""

    store: FakeStore
    site: Site
    category: Category
    inherited_forum: Forum
    override_forum: Forum
    category_set: PermissionSet
    override_set: PermissionSet
    owner: Member
    other: Member
    topic: Topic
    locked_topic: Topic
    reply: Reply

    def grant(self, permission_set: PermissionSet, role_id: str, *types: PermissionType) -> None:
        for t in types:
            self.store.permissions.add(Permission(permission_set.id, role_id, t))


def build_world() -> ForumWorld:
    store = FakeStore()
    site = Site(id=uuid4(), name="Default", title="Default site")
    category_set = PermissionSet(id=uuid4(), site_id=site.id, name="Default")
    override_set = PermissionSet(id=uuid4(), site_id=site.id, name="Staff only")
    category = Category(
        id=uuid4(), site_id=site.id, name="General", permission_set_id=category_set.id
    )
    inherited_forum = Forum(
        id=uuid4(), category_id=category.id, name="Welcome", slug="welcome"
    )
    override_forum = Forum(
        id=uuid4(),
        category_id=category.id,
        name="Staff",
        slug="staff",
        permission_set_id=override_set.id,
    )
    owner = Member(
        id=uuid4(), user_id="user-owner", email="owner@example.com", display_name="Owner"
    )
    other = Member(
        id=uuid4(), user_id="user-other", email="other@example.com", display_name="Other"
    )
    topic = Topic(
        id=uuid4(), forum_id=inherited_forum.id, member_id=owner.id, title="Hello"
    )
    locked_topic = Topic(
        id=uuid4(),
        forum_id=inherited_forum.id,
        member_id=owner.id,
        title="Closed",
        locked=True,
    )
    reply = Reply(id=uuid4(), topic_id=topic.id, member_id=owner.id)

    store.sites[site.id] = site
    store.categories[category.id] = category
    store.forums[inherited_forum.id] = inherited_forum
    store.forums[override_forum.id] = override_forum
    store.permission_sets[category_set.id] = category_set
    store.permission_sets[override_set.id] = override_set
    store.members[owner.id] = owner
    store.members[other.id] = other
    store.topics[topic.id] = topic
    store.topics[locked_topic.id] = locked_topic
    store.replies[reply.id] = reply

    return ForumWorld(
        store=store,
        site=site,
        category=category,
        inherited_forum=inherited_forum,
        override_forum=override_forum,
        category_set=category_set,
        override_set=override_set,
        owner=owner,
        other=other,
        topic=topic,
        locked_topic=locked_topic,
        reply=reply,
    )


def member_of(member: Member, *roles: str, suspended: bool = False) -> CurrentMember:
    """CurrentMember for an entity with the given roles."""
    return CurrentMember(
        id=member.id,
        user_id=member.user_id,
        display_name=member.display_name,
        roles=frozenset(roles),
        is_suspended=suspended,
    )


# --- Fixtures ---


@pytest.fixture
def world() -> ForumWorld:
    """Fresh forum data for each test."""
    return build_world()


@pytest.fixture
def uow_factory(world: ForumWorld):
    """Factory returning async context manager over the world's store."""
    return make_uow_factory(world.store)


@pytest.fixture
def cache() -> InMemoryCacheManager:
    return InMemoryCacheManager()


@pytest.fixture
def security_service() -> DefaultSecurityService:
    return DefaultSecurityService()


@pytest.fixture
def admin() -> CurrentMember:
    """Administrator with no other roles."""
    return CurrentMember(id=uuid4(), user_id="admin-1", roles=frozenset({"Admin"}), is_admin=True)
