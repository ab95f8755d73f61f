"""In-memory admin store adapter.

Implements AdminStoreProtocol for single-process hosts. Records are kept
in their serialized form (JSON bytes of AdminRecordModel) so this adapter
exercises the same encode/decode path as a persistent backend would.

Atomicity:
transaction(namespace) holds a re-entrant lock dedicated to that
namespace for the whole read -> guard -> write sequence. If the block
raises, the namespace is restored to the bytes it held on entry.
Different namespaces never block each other. One lock is created per
namespace on first use and kept for the life of the store, so the lock
table grows with the number of distinct namespaces. Hosts guard a small
fixed set of namespaces.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from pydantic import ValidationError

from secure_admin.application.dtos.admin_record import AdminRecordModel
from secure_admin.domain.errors.storage import StorageError
from secure_admin.domain.models.admin_record import AdminRecord

logger = structlog.get_logger()


class InMemoryAdminStore:
    """Thread-safe in-memory implementation of AdminStoreProtocol.

    Usage:
        store = InMemoryAdminStore()
        with store.transaction("admin"):
            store.set("admin", AdminRecord.default())
        assert store.get("admin") == AdminRecord.default()
    """

    def __init__(self) -> None:
        self._records: dict[str, bytes] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, namespace: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(namespace)
            if lock is None:
                lock = threading.RLock()
                self._locks[namespace] = lock
            return lock

    def get(self, namespace: str) -> AdminRecord | None:
        """Load and decode the record stored under namespace.

        Raises:
            StorageError: If the stored bytes are not a valid record encoding.
            InvalidAdminRecordError: If the decoded fields violate the
                record invariants.
        """
        raw = self._records.get(namespace)
        if raw is None:
            return None
        try:
            model = AdminRecordModel.model_validate_json(raw)
        except ValidationError as exc:
            logger.error(
                "admin_record_decode_failed",
                namespace=namespace,
                error_count=exc.error_count(),
            )
            raise StorageError(namespace, "stored admin record is corrupt") from exc
        return model.to_record()

    def set(self, namespace: str, record: AdminRecord) -> None:
        """Encode and store record under namespace."""
        encoded = AdminRecordModel.from_record(record).model_dump_json()
        self._records[namespace] = encoded.encode("utf-8")

    @contextmanager
    def transaction(self, namespace: str) -> Iterator[None]:
        """Serialize writers of namespace and roll back on failure."""
        with self._lock_for(namespace):
            snapshot = self._records.get(namespace)
            try:
                yield
            except BaseException:
                if snapshot is None:
                    self._records.pop(namespace, None)
                else:
                    self._records[namespace] = snapshot
                raise

    # Inspection helpers. Tests use them to assert on the stored encoding
    # and to plant corrupt records; the service never calls them.

    def raw(self, namespace: str) -> bytes | None:
        """Return the stored bytes for namespace (None if absent)."""
        return self._records.get(namespace)

    def put_raw(self, namespace: str, data: bytes) -> None:
        """Store bytes as-is, bypassing encoding and invariant checks."""
        self._records[namespace] = data

    def namespaces(self) -> list[str]:
        """Return the namespaces that currently hold a record."""
        return sorted(self._records)
