"""Base exception classes for the secure-admin domain layer."""

from __future__ import annotations

from typing import Any


class SecureAdminError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so hosts
    can catch every admin failure with a single clause while still
    branching on the concrete type.

    Attributes:
        code: Stable machine-readable error code for clients.
        message: Human-readable error description.
    """

    code: str = "secure_admin_error"

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for a client-facing response."""
        return {"error": self.code, "message": self.message}
