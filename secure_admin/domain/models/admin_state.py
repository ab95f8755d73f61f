"""Tagged admin role states.

The role state machine has four logical states. Each is its own frozen
dataclass so that impossible combinations (a proposal without an admin,
an abolished role that still has a holder) cannot be built in memory.

State Transitions:
- Uninitialized -> Owned, Abolished
- Owned -> OwnedWithProposal, Owned, Abolished
- OwnedWithProposal -> Owned, OwnedWithProposal, Abolished
- Abolished -> (terminal)

state_from_record() and state_to_record() translate between these
variants and the flat AdminRecord at the storage boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from secure_admin.domain.models.admin_record import AdminRecord
from secure_admin.domain.models.identity import Identity


@dataclass(frozen=True)
class Uninitialized:
    """No admin has ever been set and the role has not been abolished."""

    @property
    def admin(self) -> Identity | None:
        return None

    @property
    def proposed(self) -> Identity | None:
        return None

    @property
    def is_abolished(self) -> bool:
        return False


@dataclass(frozen=True)
class Owned:
    """An admin holds the role and nothing is proposed."""

    admin: Identity

    @property
    def proposed(self) -> Identity | None:
        return None

    @property
    def is_abolished(self) -> bool:
        return False


@dataclass(frozen=True)
class OwnedWithProposal:
    """An admin holds the role and a successor awaits acceptance."""

    admin: Identity
    proposed: Identity

    @property
    def is_abolished(self) -> bool:
        return False


@dataclass(frozen=True)
class Abolished:
    """The role has been thrown away forever (terminal)."""

    @property
    def admin(self) -> Identity | None:
        return None

    @property
    def proposed(self) -> Identity | None:
        return None

    @property
    def is_abolished(self) -> bool:
        return True


AdminState = Union[Uninitialized, Owned, OwnedWithProposal, Abolished]


def state_from_record(record: AdminRecord | None) -> AdminState:
    """Translate a stored record (or its absence) into a tagged state.

    Args:
        record: The record loaded from storage, or None if absent.

    Returns:
        The AdminState the record represents. None maps to Uninitialized.
    """
    if record is None:
        record = AdminRecord.default()
    if record.abolished:
        return Abolished()
    if record.admin is None:
        return Uninitialized()
    if record.proposed is None:
        return Owned(admin=record.admin)
    return OwnedWithProposal(admin=record.admin, proposed=record.proposed)


def state_to_record(state: AdminState) -> AdminRecord:
    """Flatten a tagged state into its persisted record form."""
    return AdminRecord(
        abolished=state.is_abolished,
        admin=state.admin,
        proposed=state.proposed,
    )
