"""Admin update attribution record.

Every successful update() produces one AdminUpdatedEventPayload naming
the action, the resulting admin and proposal, and the acting sender.
It exists for observability only; the persisted record stays the single
source of truth.

Attribute Format:
    [
        ("action", "update_admin"),
        ("admin", "<admin or None>"),
        ("proposed", "<proposed or None>"),
        ("sender", "<sender>"),
    ]
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from secure_admin.domain.models.admin_state import AdminState
from secure_admin.domain.models.identity import Identity

ADMIN_UPDATED_ACTION: str = "update_admin"

# Rendering of a missing identity inside host attribute lists
NONE_ATTRIBUTE: str = "None"


@dataclass(frozen=True, eq=True)
class AdminUpdatedEventPayload:
    """Attribution record of a successful admin update.

    Attributes:
        namespace: Storage namespace of the updated role.
        request_kind: Name of the request that was applied (e.g. "AcceptProposed").
        admin: Admin after the update, or None.
        proposed: Proposed admin after the update, or None.
        sender: Identity that performed the update.
        action: Always ADMIN_UPDATED_ACTION.
    """

    namespace: str
    request_kind: str
    admin: str | None
    proposed: str | None
    sender: str
    action: str = ADMIN_UPDATED_ACTION

    @classmethod
    def create(
        cls,
        namespace: str,
        request: object,
        state: AdminState,
        sender: Identity,
    ) -> AdminUpdatedEventPayload:
        """Build the record from the state that was just persisted.

        Args:
            namespace: Storage namespace of the role.
            request: The applied update request.
            state: The resulting AdminState.
            sender: The acting caller.

        Returns:
            AdminUpdatedEventPayload describing the update.
        """
        return cls(
            namespace=namespace,
            request_kind=type(request).__name__,
            admin=str(state.admin) if state.admin is not None else None,
            proposed=str(state.proposed) if state.proposed is not None else None,
            sender=str(sender),
        )

    def attributes(self) -> list[tuple[str, str]]:
        """Return the ordered host attributes, rendering None as "None"."""
        return [
            ("action", self.action),
            ("admin", self.admin if self.admin is not None else NONE_ATTRIBUTE),
            (
                "proposed",
                self.proposed if self.proposed is not None else NONE_ATTRIBUTE,
            ),
            ("sender", self.sender),
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary, keeping missing identities as None."""
        return {
            "action": self.action,
            "namespace": self.namespace,
            "request_kind": self.request_kind,
            "admin": self.admin,
            "proposed": self.proposed,
            "sender": self.sender,
        }

    def to_json(self) -> str:
        """Serialize deterministically (sorted keys)."""
        return json.dumps(self.to_dict(), sort_keys=True)
