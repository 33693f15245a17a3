"""Application entry point and composition root."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import structlog

from forumgate import __version__
from forumgate.application.use_cases.authorization.authorize_action import (
    AuthorizeActionUseCase,
)
from forumgate.application.use_cases.category.update_category import UpdateCategoryUseCase
from forumgate.application.use_cases.context.context_service import ContextService
from forumgate.application.use_cases.forum.move_forum import MoveForumUseCase
from forumgate.application.use_cases.forum.update_forum_permission_set import (
    UpdateForumPermissionSetUseCase,
)
from forumgate.application.use_cases.permission.build_permission_models import (
    PermissionModelBuilder,
)
from forumgate.application.use_cases.permission.create_permission_set import (
    CreatePermissionSetUseCase,
)
from forumgate.application.use_cases.permission.delete_permission_set import (
    DeletePermissionSetUseCase,
)
from forumgate.application.use_cases.permission.update_permission_set import (
    UpdatePermissionSetUseCase,
)
from forumgate.config import Settings, get_settings
from forumgate.infrastructure.auth.keycloak_provider import KeycloakProvider
from forumgate.infrastructure.cache.memory_cache import InMemoryCacheManager
from forumgate.infrastructure.permission.security_service import DefaultSecurityService
from forumgate.infrastructure.persistence.postgres.connection import (
    close_pool,
    create_pool,
    open_pool,
)
from forumgate.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)


def configure_logging(settings: Settings) -> None:
    """Configure structlog: JSON in production, console otherwise."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.is_production
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@dataclass
class ForumGate:
    """Wired authorization core handed to request handlers."""

    context: ContextService
    permission_model_builder: PermissionModelBuilder
    security_service: DefaultSecurityService
    authorize_action: AuthorizeActionUseCase
    create_permission_set: CreatePermissionSetUseCase
    update_permission_set: UpdatePermissionSetUseCase
    delete_permission_set: DeletePermissionSetUseCase
    update_category: UpdateCategoryUseCase
    update_forum_permission_set: UpdateForumPermissionSetUseCase
    move_forum: MoveForumUseCase
    cache: InMemoryCacheManager


def build_forumgate(
    settings: Settings,
    uow_factory: object,
    identity_provider: object | None = None,
) -> ForumGate:
    """Wire use cases around a unit of work factory."""
    cache = InMemoryCacheManager()
    security_service = DefaultSecurityService()
    permission_model_builder = PermissionModelBuilder(
        unit_of_work_factory=uow_factory,
        cache_manager=cache,
    )
    context = ContextService(
        unit_of_work_factory=uow_factory,
        cache_manager=cache,
        identity_provider=identity_provider,
        default_site_name=settings.default_site_name,
        admin_role_name=settings.admin_role_name,
        guest_role_id=settings.guest_role_id,
        everyone_role_id=settings.everyone_role_id,
    )

    return ForumGate(
        context=context,
        permission_model_builder=permission_model_builder,
        security_service=security_service,
        authorize_action=AuthorizeActionUseCase(
            unit_of_work_factory=uow_factory,
            permission_model_builder=permission_model_builder,
            security_service=security_service,
        ),
        create_permission_set=CreatePermissionSetUseCase(unit_of_work_factory=uow_factory),
        update_permission_set=UpdatePermissionSetUseCase(uow_factory, cache),
        delete_permission_set=DeletePermissionSetUseCase(uow_factory, cache),
        update_category=UpdateCategoryUseCase(uow_factory, cache),
        update_forum_permission_set=UpdateForumPermissionSetUseCase(uow_factory, cache),
        move_forum=MoveForumUseCase(uow_factory, cache),
        cache=cache,
    )


def create_forumgate(settings: Settings | None = None) -> tuple[ForumGate, object]:
    """Composition root - build the core over PostgreSQL and Keycloak.

    Returns the core and its connection pool; the pool is not opened.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    return build_forumgate(settings, uow_factory, keycloak), pool


@asynccontextmanager
async def forumgate_lifespan(settings: Settings | None = None) -> AsyncIterator[ForumGate]:
    """Open the connection pool for the lifetime of the block."""
    gate, pool = create_forumgate(settings)
    await open_pool(pool)
    try:
        yield gate
    finally:
        gate.cache.clear()
        await close_pool(pool)


def main() -> None:
    """CLI entry point."""
    print(f"forumgate v{__version__}")
