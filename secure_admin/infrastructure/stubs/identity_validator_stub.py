"""Identity validator stub for testing.

Accepts any non-empty string as-is, the way a host would treat an
identity it has already authenticated. Specific inputs can be marked
for rejection to exercise validation failures.
"""

from __future__ import annotations

from secure_admin.domain.errors.identity import IdentityValidationError
from secure_admin.domain.models.identity import Identity


class IdentityValidatorStub:
    """Stub implementation of IdentityValidatorProtocol for testing.

    Usage:
        validator = IdentityValidatorStub()
        validator.reject("bad_addr")
        validator.validate("peter")     # Identity("peter")
        validator.validate("bad_addr")  # raises IdentityValidationError
    """

    def __init__(self) -> None:
        self._rejected: set[str] = set()
        self.validated: list[str] = []

    def reject(self, raw: str) -> None:
        """Make validate() fail for raw."""
        self._rejected.add(raw)

    def validate(self, raw: str) -> Identity:
        self.validated.append(raw)
        if not raw:
            raise IdentityValidationError(raw, "identity is empty")
        if raw in self._rejected:
            raise IdentityValidationError(raw, "rejected by stub")
        return Identity(raw)
