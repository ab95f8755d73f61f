"""Infrastructure adapters for secure-admin.

Adapters implement the ports defined in the application layer,
providing concrete implementations for storage and identity validation.
"""

from secure_admin.infrastructure.adapters.identity_validator import (
    IDENTITY_PATTERN,
    CanonicalIdentityValidator,
)
from secure_admin.infrastructure.adapters.in_memory_admin_store import (
    InMemoryAdminStore,
)

__all__: list[str] = [
    "IDENTITY_PATTERN",
    "CanonicalIdentityValidator",
    "InMemoryAdminStore",
]
