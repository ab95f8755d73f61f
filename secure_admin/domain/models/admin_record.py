"""Persisted admin record (flat storage form).

The record is the only entity the state machine persists. It stays flat
(three fields) so its stored shape is stable; the in-memory logic works
on the tagged AdminState variants in admin_state.py instead.

Record invariants:
- abolished implies admin is None and proposed is None
- proposed is not None implies admin is not None

A missing record in storage means exactly AdminRecord.default().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from secure_admin.domain.errors.storage import InvalidAdminRecordError
from secure_admin.domain.models.identity import Identity


@dataclass(frozen=True, eq=True)
class AdminRecord:
    """Flat admin role record as stored by an AdminStore.

    Attributes:
        abolished: Once True, permanently True and nothing else may change.
        admin: Current holder of the role (None if uninitialized or abolished).
        proposed: Candidate awaiting acceptance (None unless a proposal is pending).

    Raises:
        InvalidAdminRecordError: If the field combination is not a reachable state.
    """

    abolished: bool = False
    admin: Identity | None = None
    proposed: Identity | None = None

    def __post_init__(self) -> None:
        """Reject field combinations that no transition can produce."""
        if self.abolished and (self.admin is not None or self.proposed is not None):
            raise InvalidAdminRecordError(
                "Abolished admin record must not name an admin or a proposal"
            )
        if self.proposed is not None and self.admin is None:
            raise InvalidAdminRecordError(
                "Admin record cannot hold a proposal without an admin"
            )

    @classmethod
    def default(cls) -> AdminRecord:
        """Return the uninitialized record (equivalent to no record at all)."""
        return cls(abolished=False, admin=None, proposed=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flat dictionary form, keeping None as None."""
        return {
            "abolished": self.abolished,
            "admin": str(self.admin) if self.admin is not None else None,
            "proposed": str(self.proposed) if self.proposed is not None else None,
        }
