"""Admin store stub for testing.

This module provides a stub implementation of AdminStoreProtocol for unit
and integration testing.

The stub keeps domain records in a dict and offers:
1. Configurable failure modes for reads and writes
2. Call counters for asserting that rejected operations never write
3. Rollback of writes made inside a failing transaction
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from secure_admin.domain.errors.storage import StorageError
from secure_admin.domain.models.admin_record import AdminRecord


@dataclass
class FailureMode:
    """Configuration for simulating store failures."""

    get_fails: bool = False
    set_fails: bool = False


class AdminStoreStub:
    """Stub implementation of AdminStoreProtocol for testing.

    Usage:
        stub = AdminStoreStub()
        service = SecureAdminService("admin", stub, IdentityValidatorStub())

        service.initialize(SetInitialAdmin(admin="peter"))
        assert stub.set_count == 1

        # Test failure modes
        stub.set_failure_mode(FailureMode(set_fails=True))
        # Writes now raise StorageError

        # Reset for next test
        stub.clear()
    """

    def __init__(self) -> None:
        """Initialize stub with no records."""
        self._records: dict[str, AdminRecord] = {}
        self._failure_mode: FailureMode = FailureMode()
        self._get_count: int = 0
        self._set_count: int = 0
        self._transaction_count: int = 0

    def set_failure_mode(self, mode: FailureMode) -> None:
        """Configure failure simulation for testing."""
        self._failure_mode = mode

    def clear_failure_mode(self) -> None:
        """Clear failure mode (store works normally)."""
        self._failure_mode = FailureMode()

    def clear(self) -> None:
        """Clear all state for test isolation."""
        self._records.clear()
        self._failure_mode = FailureMode()
        self._get_count = 0
        self._set_count = 0
        self._transaction_count = 0

    @property
    def get_count(self) -> int:
        """Get the number of times get() was called."""
        return self._get_count

    @property
    def set_count(self) -> int:
        """Get the number of successful set() calls."""
        return self._set_count

    @property
    def transaction_count(self) -> int:
        """Get the number of transactions opened."""
        return self._transaction_count

    def seed(self, namespace: str, record: AdminRecord) -> None:
        """Place a record directly, bypassing counters and failure modes."""
        self._records[namespace] = record

    def record(self, namespace: str) -> AdminRecord | None:
        """Get the stored record without counting (for test assertions)."""
        return self._records.get(namespace)

    def get(self, namespace: str) -> AdminRecord | None:
        self._get_count += 1
        if self._failure_mode.get_fails:
            raise StorageError(namespace, "simulated read failure")
        return self._records.get(namespace)

    def set(self, namespace: str, record: AdminRecord) -> None:
        if self._failure_mode.set_fails:
            raise StorageError(namespace, "simulated write failure")
        self._set_count += 1
        self._records[namespace] = record

    @contextmanager
    def transaction(self, namespace: str) -> Iterator[None]:
        self._transaction_count += 1
        snapshot = self._records.get(namespace)
        try:
            yield
        except BaseException:
            if snapshot is None:
                self._records.pop(namespace, None)
            else:
                self._records[namespace] = snapshot
            raise
