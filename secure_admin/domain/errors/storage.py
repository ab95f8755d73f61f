"""Storage-related domain errors."""

from __future__ import annotations

from secure_admin.domain.exceptions import SecureAdminError


class StorageError(SecureAdminError):
    """Raised when the admin store cannot read or write a record.

    Store adapters raise this (or a subclass); the state machine
    propagates it verbatim.

    Attributes:
        namespace: Storage namespace the failing operation addressed.
    """

    code = "storage_failure"

    def __init__(self, namespace: str, message: str) -> None:
        self.namespace = namespace
        super().__init__(f"Admin store failure for {namespace!r}: {message}")


class InvalidAdminRecordError(SecureAdminError):
    """Raised when an admin record violates the record invariants.

    A record is invalid when it is abolished but still names an admin or
    a proposal, or when it names a proposal without an admin.
    """

    code = "invalid_record"
