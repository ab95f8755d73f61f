"""Identity value object.

An Identity is the canonical, validated representation of a caller. It
is opaque to the state machine: two identities are the same holder
exactly when their canonical strings are equal.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True, order=True)
class Identity:
    """Canonical caller identity (immutable, hashable).

    Identities are produced by an IdentityValidator. Hosts that already
    hold an authenticated sender (the envelope of the current request)
    may wrap it with Identity.unchecked().

    Attributes:
        value: The canonical identity string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"Identity value must be a string, got {type(self.value).__name__}"
            )

    @classmethod
    def unchecked(cls, raw: str) -> Identity:
        """Wrap a string that the caller vouches is already canonical."""
        return cls(value=raw)

    def __str__(self) -> str:
        return self.value
