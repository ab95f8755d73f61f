"""Domain models for secure-admin."""

from secure_admin.domain.models.admin_record import AdminRecord
from secure_admin.domain.models.admin_state import (
    Abolished,
    AdminState,
    Owned,
    OwnedWithProposal,
    Uninitialized,
    state_from_record,
    state_to_record,
)
from secure_admin.domain.models.admin_view import AdminView
from secure_admin.domain.models.identity import Identity
from secure_admin.domain.models.requests import (
    ADMIN_INIT_TYPES,
    ADMIN_UPDATE_TYPES,
    AbolishAdminRole,
    AcceptProposed,
    AdminInit,
    AdminUpdate,
    ClearProposed,
    ProposeNewAdmin,
    SetInitialAdmin,
)

__all__: list[str] = [
    "ADMIN_INIT_TYPES",
    "ADMIN_UPDATE_TYPES",
    "AbolishAdminRole",
    "Abolished",
    "AcceptProposed",
    "AdminInit",
    "AdminRecord",
    "AdminState",
    "AdminUpdate",
    "AdminView",
    "ClearProposed",
    "Identity",
    "Owned",
    "OwnedWithProposal",
    "ProposeNewAdmin",
    "SetInitialAdmin",
    "Uninitialized",
    "state_from_record",
    "state_to_record",
]
