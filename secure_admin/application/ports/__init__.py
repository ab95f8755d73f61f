"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports keep the role state machine free of any concrete storage or
identity scheme and make it testable with stubs.

Available ports:
- AdminStoreProtocol: Load/save of the single admin record per namespace
- IdentityValidatorProtocol: Raw string -> canonical Identity
"""

from secure_admin.application.ports.admin_store import AdminStoreProtocol
from secure_admin.application.ports.identity_validator import (
    IdentityValidatorProtocol,
)

__all__: list[str] = ["AdminStoreProtocol", "IdentityValidatorProtocol"]
