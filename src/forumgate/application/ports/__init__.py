"""Application ports - interfaces for external adapters."""

from forumgate.application.ports.cache_manager import CacheManager
from forumgate.application.ports.identity_provider import (
    IdentityClaims,
    IdentityProvider,
)
from forumgate.application.ports.security_service import SecurityService
from forumgate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CacheManager",
    "IdentityClaims",
    "IdentityProvider",
    "SecurityService",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
