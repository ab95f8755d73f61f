"""Admin store port.

This module defines the protocol for persisting the admin record. A store
keeps at most one AdminRecord per namespace. A namespace with no record is
a valid, meaningful state: the role has not been initialized yet.

Atomicity:
The state machine performs read -> guard -> write for every mutation.
That sequence is only safe if nothing else writes the same namespace in
between, so the store supplies transaction(namespace): a context manager
scoped to one namespace that serializes writers and discards partial
writes when the block raises. Hosts that already run each request in
their own transaction may implement it as a no-op.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from secure_admin.domain.models.admin_record import AdminRecord


class AdminStoreProtocol(Protocol):
    """Protocol for admin record storage.

    Implementers MUST:
    1. Return None from get() when no record was ever saved
    2. Be strongly consistent inside one transaction() block
    3. Raise StorageError (or a subclass) on any backend failure
    4. Never delete a record; abolition is stored as a value

    Usage:
        with store.transaction("admin"):
            record = store.get("admin")
            store.set("admin", new_record)
    """

    def get(self, namespace: str) -> AdminRecord | None:
        """Load the record stored under namespace.

        Args:
            namespace: Storage namespace of the role.

        Returns:
            The stored AdminRecord, or None if nothing was ever saved.

        Raises:
            StorageError: If the backend cannot be read.
        """
        ...

    def set(self, namespace: str, record: AdminRecord) -> None:
        """Save the record under namespace, replacing any previous value.

        Args:
            namespace: Storage namespace of the role.
            record: The record to persist.

        Raises:
            StorageError: If the backend cannot be written.
        """
        ...

    def transaction(self, namespace: str) -> AbstractContextManager[None]:
        """Open an exclusive read-modify-write region for namespace.

        Args:
            namespace: Storage namespace of the role.

        Returns:
            A context manager. Writes made inside are rolled back if the
            block raises.
        """
        ...
