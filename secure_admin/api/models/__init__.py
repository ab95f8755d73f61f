"""Pydantic API models for secure-admin."""

from secure_admin.api.models.admin import (
    AdminInitMessage,
    AdminUpdateMessage,
    ProposeNewAdminBody,
    SecureAdminResponse,
    SetInitialAdminBody,
    UnitBody,
)

__all__ = [
    "AdminInitMessage",
    "AdminUpdateMessage",
    "ProposeNewAdminBody",
    "SecureAdminResponse",
    "SetInitialAdminBody",
    "UnitBody",
]
