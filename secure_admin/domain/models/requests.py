"""Admin role requests.

Two request families exist:
- AdminInit: the bootstrap request accepted by initialize()
- AdminUpdate: the caller-gated requests accepted by update()

AbolishAdminRole belongs to both families.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SetInitialAdmin:
    """Set the first admin. Anyone may send this while uninitialized.

    Attributes:
        admin: Raw identity string, validated before it is stored.
    """

    admin: str


@dataclass(frozen=True)
class ProposeNewAdmin:
    """Nominate a successor. Only the current admin may send this.

    Attributes:
        proposed: Raw identity string, validated before it is stored.
    """

    proposed: str


@dataclass(frozen=True)
class ClearProposed:
    """Withdraw the pending proposal. Only the current admin may send this."""


@dataclass(frozen=True)
class AcceptProposed:
    """Take over the role. Only the proposed admin may send this."""


@dataclass(frozen=True)
class AbolishAdminRole:
    """Throw away the role forever. No admin can ever be set afterwards."""


AdminInit = Union[SetInitialAdmin, AbolishAdminRole]
AdminUpdate = Union[ProposeNewAdmin, ClearProposed, AcceptProposed, AbolishAdminRole]

ADMIN_INIT_TYPES: tuple[type, ...] = (SetInitialAdmin, AbolishAdminRole)
ADMIN_UPDATE_TYPES: tuple[type, ...] = (
    ProposeNewAdmin,
    ClearProposed,
    AcceptProposed,
    AbolishAdminRole,
)
