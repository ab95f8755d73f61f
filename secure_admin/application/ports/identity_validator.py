"""Identity validator port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from secure_admin.domain.models.identity import Identity


class IdentityValidatorProtocol(Protocol):
    """Protocol for turning raw strings into canonical identities.

    The state machine validates every identity it receives as a raw
    string (initial admin, proposed admin). Validation errors pass
    through the state machine unchanged.
    """

    def validate(self, raw: str) -> Identity:
        """Validate and canonicalize raw.

        Args:
            raw: Free-form identity string from a request.

        Returns:
            The canonical Identity.

        Raises:
            IdentityValidationError: If raw is malformed.
        """
        ...
