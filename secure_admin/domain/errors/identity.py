"""Identity validation errors.

Raised by identity validators when a raw string cannot be turned into a
canonical Identity. The state machine lets these propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from secure_admin.domain.exceptions import SecureAdminError


class IdentityValidationError(SecureAdminError):
    """Raised when a raw identity string fails validation.

    Attributes:
        raw: The rejected input, exactly as supplied.
        reason: Short description of the rule that failed.
    """

    code = "invalid_identity"

    def __init__(self, raw: str, reason: str) -> None:
        """Initialize validation error.

        Args:
            raw: The rejected input.
            reason: Which validation rule was violated.
        """
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid identity {raw!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary including the rejected input."""
        data = super().to_dict()
        data["raw"] = self.raw
        data["reason"] = self.reason
        return data
