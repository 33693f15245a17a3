"""Unit tests for PermissionModelBuilder."""

import asyncio
from dataclasses import replace
from uuid import uuid4

import pytest

from forumgate.application.cache_keys import CacheKeys
from forumgate.application.dto import CurrentMember, PermissionModel
from forumgate.application.use_cases.permission.build_permission_models import (
    PermissionModelBuilder,
)
from forumgate.domain.exceptions import NotFound
from forumgate.domain.value_objects import PermissionSetSource, PermissionType, StatusType
from forumgate.infrastructure.cache.memory_cache import InMemoryCacheManager
from forumgate.infrastructure.permission.security_service import DefaultSecurityService

from tests.conftest import ForumWorld


@pytest.fixture
def builder(uow_factory, cache: InMemoryCacheManager) -> PermissionModelBuilder:
    return PermissionModelBuilder(unit_of_work_factory=uow_factory, cache_manager=cache)


@pytest.mark.asyncio
async def test_forum_without_override_uses_category_set(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.grant(world.category_set, "Member", PermissionType.READ)
    world.grant(world.override_set, "Staff", PermissionType.READ)

    models = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )

    assert models == frozenset({PermissionModel("Member", PermissionType.READ)})
    effective = await builder.resolve_permission_set(world.site.id, world.inherited_forum.id)
    assert effective.source == PermissionSetSource.CATEGORY
    assert effective.permission_set_id == world.category_set.id


@pytest.mark.asyncio
async def test_forum_override_wins_even_when_category_has_set(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.grant(world.category_set, "Member", PermissionType.READ, PermissionType.REPLY)
    world.grant(world.override_set, "Staff", PermissionType.READ)

    models = await builder.build_permission_models_by_forum_id(
        world.site.id, world.override_forum.id
    )

    assert models == frozenset({PermissionModel("Staff", PermissionType.READ)})
    effective = await builder.resolve_permission_set(world.site.id, world.override_forum.id)
    assert effective.source == PermissionSetSource.FORUM


@pytest.mark.asyncio
async def test_no_permission_set_returns_empty(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.store.categories[world.category.id] = replace(world.category, permission_set_id=None)

    models = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )

    assert models == frozenset()


@pytest.mark.asyncio
async def test_permission_set_without_rows_returns_empty(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    models = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )
    assert models == frozenset()


@pytest.mark.asyncio
async def test_unknown_forum_raises_not_found(
    world: ForumWorld, builder: PermissionModelBuilder, cache: InMemoryCacheManager
) -> None:
    forum_id = uuid4()
    with pytest.raises(NotFound, match="Forum"):
        await builder.build_permission_models_by_forum_id(world.site.id, forum_id)
    assert CacheKeys.forum_permission_set(world.site.id, forum_id) not in cache


@pytest.mark.asyncio
async def test_forum_of_other_site_raises_not_found(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    with pytest.raises(NotFound):
        await builder.build_permission_models_by_forum_id(uuid4(), world.inherited_forum.id)


@pytest.mark.asyncio
async def test_deleted_forum_raises_not_found(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    forum = world.inherited_forum
    world.store.forums[forum.id] = replace(forum, status=StatusType.DELETED)
    with pytest.raises(NotFound):
        await builder.build_permission_models_by_forum_id(world.site.id, forum.id)


@pytest.mark.asyncio
async def test_repeated_calls_return_equal_sets(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.grant(world.category_set, "Member", PermissionType.READ, PermissionType.START)

    first = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )
    second = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )

    assert first == second
    assert world.store.calls["forums.get_permission_set_refs"] == 1
    assert world.store.calls["permissions.list_by_permission_set"] == 1


@pytest.mark.asyncio
async def test_forums_sharing_a_set_share_its_rows(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.grant(world.category_set, "Member", PermissionType.READ)
    world.store.forums[world.override_forum.id] = replace(
        world.override_forum, permission_set_id=None
    )

    await builder.build_permission_models_by_forum_id(world.site.id, world.inherited_forum.id)
    await builder.build_permission_models_by_forum_id(world.site.id, world.override_forum.id)

    assert world.store.calls["forums.get_permission_set_refs"] == 2
    assert world.store.calls["permissions.list_by_permission_set"] == 1


@pytest.mark.asyncio
async def test_concurrent_builds_hit_store_once(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    world.grant(world.category_set, "Member", PermissionType.READ)

    results = await asyncio.gather(
        *[
            builder.build_permission_models_by_forum_id(world.site.id, world.inherited_forum.id)
            for _ in range(10)
        ]
    )

    assert len(set(results)) == 1
    assert world.store.calls["forums.get_permission_set_refs"] == 1
    assert world.store.calls["permissions.list_by_permission_set"] == 1


@pytest.mark.asyncio
async def test_default_site_scenario(
    world: ForumWorld, builder: PermissionModelBuilder
) -> None:
    """Category set grants Member read and reply; forum inherits it."""
    world.grant(world.category_set, "Member", PermissionType.READ, PermissionType.REPLY)
    member = CurrentMember(
        id=world.owner.id, roles=frozenset({"Member"}), is_suspended=False
    )
    security = DefaultSecurityService()

    permissions = await builder.build_permission_models_by_forum_id(
        world.site.id, world.inherited_forum.id
    )

    assert security.has_permission(member, PermissionType.REPLY, permissions)
    assert not security.has_permission(member, PermissionType.DELETE, permissions)
    assert not security.has_permission(member, PermissionType.EDIT, permissions)
