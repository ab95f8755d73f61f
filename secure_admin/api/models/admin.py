"""Admin API models.

Pydantic models for admin role requests and responses. Requests are
externally tagged: the single key names the request kind.

Init messages:
    {"set_initial_admin": {"admin": "peter"}}
    {"abolish_admin_role": {}}      or  "abolish_admin_role"

Update messages:
    {"propose_new_admin": {"proposed": "miles"}}
    {"clear_proposed": {}}          or  "clear_proposed"
    {"accept_proposed": {}}         or  "accept_proposed"
    {"abolish_admin_role": {}}      or  "abolish_admin_role"

Response:
    {"admin": "peter", "proposed": null}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from secure_admin.domain.models.admin_view import AdminView
from secure_admin.domain.models.requests import (
    AbolishAdminRole,
    AcceptProposed,
    AdminInit,
    AdminUpdate,
    ClearProposed,
    ProposeNewAdmin,
    SetInitialAdmin,
)


def _expand_unit_variant(data: Any) -> Any:
    # "clear_proposed" is shorthand for {"clear_proposed": {}}
    if isinstance(data, str):
        return {data: {}}
    return data


def _single_variant(model: BaseModel, variants: tuple[str, ...]) -> str:
    present = [name for name in variants if getattr(model, name) is not None]
    if len(present) != 1:
        raise ValueError(
            f"exactly one of {', '.join(variants)} must be set, got {len(present)}"
        )
    return present[0]


class UnitBody(BaseModel):
    """Empty body of a request kind that carries no fields."""

    model_config = ConfigDict(extra="forbid")


class SetInitialAdminBody(BaseModel):
    """Body of set_initial_admin.

    Attributes:
        admin: Raw identity of the first admin (validated by the service).
    """

    model_config = ConfigDict(extra="forbid")

    admin: str = Field(
        ...,
        description="Raw identity of the initial admin",
        examples=["peter"],
    )


class ProposeNewAdminBody(BaseModel):
    """Body of propose_new_admin.

    Attributes:
        proposed: Raw identity of the successor (validated by the service).
    """

    model_config = ConfigDict(extra="forbid")

    proposed: str = Field(
        ...,
        description="Raw identity of the proposed admin",
        examples=["miles"],
    )


_INIT_VARIANTS = ("set_initial_admin", "abolish_admin_role")
_UPDATE_VARIANTS = (
    "propose_new_admin",
    "clear_proposed",
    "accept_proposed",
    "abolish_admin_role",
)


class AdminInitMessage(BaseModel):
    """Request to initialize the admin role. Exactly one field is set."""

    model_config = ConfigDict(extra="forbid")

    set_initial_admin: SetInitialAdminBody | None = Field(
        default=None,
        description="Set the first admin",
    )
    abolish_admin_role: UnitBody | None = Field(
        default=None,
        description="Abolish the role without ever setting an admin",
    )

    @model_validator(mode="before")
    @classmethod
    def expand_unit_variant(cls, data: Any) -> Any:
        return _expand_unit_variant(data)

    @model_validator(mode="after")
    def validate_single_variant(self) -> AdminInitMessage:
        """Reject messages naming zero or several request kinds."""
        _single_variant(self, _INIT_VARIANTS)
        return self

    def to_request(self) -> AdminInit:
        """Convert to the domain init request."""
        if self.set_initial_admin is not None:
            return SetInitialAdmin(admin=self.set_initial_admin.admin)
        return AbolishAdminRole()


class AdminUpdateMessage(BaseModel):
    """Request to update the admin role. Exactly one field is set."""

    model_config = ConfigDict(extra="forbid")

    propose_new_admin: ProposeNewAdminBody | None = Field(
        default=None,
        description="Propose a new admin (current admin only)",
    )
    clear_proposed: UnitBody | None = Field(
        default=None,
        description="Withdraw the pending proposal (current admin only)",
    )
    accept_proposed: UnitBody | None = Field(
        default=None,
        description="Accept the role (proposed admin only)",
    )
    abolish_admin_role: UnitBody | None = Field(
        default=None,
        description="Abolish the role forever (current admin only)",
    )

    @model_validator(mode="before")
    @classmethod
    def expand_unit_variant(cls, data: Any) -> Any:
        return _expand_unit_variant(data)

    @model_validator(mode="after")
    def validate_single_variant(self) -> AdminUpdateMessage:
        """Reject messages naming zero or several request kinds."""
        _single_variant(self, _UPDATE_VARIANTS)
        return self

    def to_request(self) -> AdminUpdate:
        """Convert to the domain update request."""
        if self.propose_new_admin is not None:
            return ProposeNewAdmin(proposed=self.propose_new_admin.proposed)
        if self.clear_proposed is not None:
            return ClearProposed()
        if self.accept_proposed is not None:
            return AcceptProposed()
        return AbolishAdminRole()


class SecureAdminResponse(BaseModel):
    """Response describing the admin role.

    Attributes:
        admin: Current admin, or None.
        proposed: Proposed admin, or None.
    """

    admin: str | None = Field(
        default=None,
        description="Current admin (None if uninitialized or abolished)",
    )
    proposed: str | None = Field(
        default=None,
        description="Proposed admin awaiting acceptance (None if none)",
    )

    @classmethod
    def from_view(cls, view: AdminView) -> SecureAdminResponse:
        return cls(admin=view.admin, proposed=view.proposed)
