"""Public projection of the admin role state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=True)
class AdminView:
    """Externally observable snapshot of the role.

    None means "no such identity" and is kept distinct from an empty
    string in every serialized form.

    Attributes:
        admin: Current admin as a string, or None.
        proposed: Proposed admin as a string, or None.
    """

    admin: str | None
    proposed: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"admin": self.admin, "proposed": self.proposed}
