"""Bootstrap wiring for secure-admin."""

from secure_admin.bootstrap.logging import configure_structlog
from secure_admin.bootstrap.secure_admin import (
    create_secure_admin,
    get_admin_store,
    set_admin_store,
)

__all__ = [
    "configure_structlog",
    "create_secure_admin",
    "get_admin_store",
    "set_admin_store",
]
