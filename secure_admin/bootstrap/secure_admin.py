"""Bootstrap wiring for the secure admin service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from secure_admin.application.services.secure_admin_service import (
    SecureAdminService,
)
from secure_admin.config.admin_config import SecureAdminConfig
from secure_admin.infrastructure.adapters.identity_validator import (
    CanonicalIdentityValidator,
)
from secure_admin.infrastructure.adapters.in_memory_admin_store import (
    InMemoryAdminStore,
)

if TYPE_CHECKING:
    from secure_admin.application.ports.admin_store import AdminStoreProtocol
    from secure_admin.application.ports.identity_validator import (
        IdentityValidatorProtocol,
    )


_admin_store: AdminStoreProtocol | None = None


def get_admin_store() -> AdminStoreProtocol:
    """Get the process-wide admin store instance.

    Returns:
        AdminStoreProtocol implementation (in-memory unless replaced).
    """
    global _admin_store
    if _admin_store is None:
        _admin_store = InMemoryAdminStore()
    return _admin_store


def set_admin_store(store: AdminStoreProtocol | None) -> None:
    """Set the process-wide admin store instance (None resets it).

    Args:
        store: AdminStoreProtocol implementation.
    """
    global _admin_store
    _admin_store = store


def create_secure_admin(
    config: SecureAdminConfig | None = None,
    store: AdminStoreProtocol | None = None,
    validator: IdentityValidatorProtocol | None = None,
) -> SecureAdminService:
    """Build a SecureAdminService.

    Args:
        config: Service configuration (defaults to the environment).
        store: Admin store (defaults to the process-wide store).
        validator: Identity validator (defaults to CanonicalIdentityValidator).

    Returns:
        SecureAdminService bound to config.namespace.
    """
    config = config or SecureAdminConfig.from_environment()
    return SecureAdminService(
        namespace=config.namespace,
        store=store if store is not None else get_admin_store(),
        validator=validator or CanonicalIdentityValidator(config),
    )
