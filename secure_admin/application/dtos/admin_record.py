"""Persisted admin record schema.

Pydantic model describing the flat stored form of the admin record:

    {"abolished": false, "admin": "peter", "proposed": null}

Store adapters serialize with this model so every backend writes the
same bytes for the same record. Identities are stored as their canonical
strings; null and "" are different values.

Architecture Note:
Defined in the application layer so infrastructure adapters and the API
can both depend on it without depending on each other.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from secure_admin.domain.models.admin_record import AdminRecord
from secure_admin.domain.models.identity import Identity


class AdminRecordModel(BaseModel):
    """Serialized admin record.

    Attributes:
        abolished: Whether the role has been abolished.
        admin: Canonical admin identity, or None.
        proposed: Canonical proposed identity, or None.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    abolished: bool = Field(
        default=False,
        description="Whether the admin role has been abolished (permanent)",
    )
    admin: str | None = Field(
        default=None,
        description="Current admin identity (None if unset or abolished)",
    )
    proposed: str | None = Field(
        default=None,
        description="Proposed admin identity awaiting acceptance",
    )

    @classmethod
    def from_record(cls, record: AdminRecord) -> AdminRecordModel:
        return cls(**record.to_dict())

    def to_record(self) -> AdminRecord:
        """Convert back to the domain record.

        Raises:
            InvalidAdminRecordError: If the stored fields violate the
                record invariants.
        """
        return AdminRecord(
            abolished=self.abolished,
            admin=Identity(self.admin) if self.admin is not None else None,
            proposed=Identity(self.proposed) if self.proposed is not None else None,
        )
