"""Infrastructure stubs for development and testing.

Available stubs:
- AdminStoreStub: In-memory admin records with injectable failures and call counters
- IdentityValidatorStub: Accepts any non-empty string unless told to reject it

WARNING: These stubs are NOT for production use.
Production implementations are in secure_admin/infrastructure/adapters/.
"""

from secure_admin.infrastructure.stubs.admin_store_stub import (
    AdminStoreStub,
    FailureMode,
)
from secure_admin.infrastructure.stubs.identity_validator_stub import (
    IdentityValidatorStub,
)

__all__: list[str] = ["AdminStoreStub", "FailureMode", "IdentityValidatorStub"]
