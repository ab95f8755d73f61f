"""Canonical identity validator adapter.

Implements IdentityValidatorProtocol. An identity is canonical when it is
already in normalized form; the validator never rewrites input, it only
accepts or rejects it, so a mistyped identity cannot silently become a
different one.

Rules (checked in order):
1. Not empty
2. No leading or trailing whitespace
3. Lowercase (normalized)
4. Length within [identity_min_length, identity_max_length]
5. Only characters matching IDENTITY_PATTERN
"""

from __future__ import annotations

import re

from secure_admin.config.admin_config import (
    DEFAULT_SECURE_ADMIN_CONFIG,
    SecureAdminConfig,
)
from secure_admin.domain.errors.identity import IdentityValidationError
from secure_admin.domain.models.identity import Identity

IDENTITY_PATTERN = re.compile(r"[a-z0-9_.\-]+")


class CanonicalIdentityValidator:
    """Validator accepting only already-canonical identity strings.

    Attributes:
        min_length: Shortest accepted identity.
        max_length: Longest accepted identity.
    """

    def __init__(self, config: SecureAdminConfig | None = None) -> None:
        config = config or DEFAULT_SECURE_ADMIN_CONFIG
        self.min_length = config.identity_min_length
        self.max_length = config.identity_max_length

    def validate(self, raw: str) -> Identity:
        """Validate raw and return it as an Identity.

        Raises:
            IdentityValidationError: If raw breaks any rule.
        """
        if not isinstance(raw, str):
            raise IdentityValidationError(repr(raw), "identity must be a string")
        if not raw:
            raise IdentityValidationError(raw, "identity is empty")
        if raw != raw.strip():
            raise IdentityValidationError(raw, "surrounding whitespace")
        if raw != raw.lower():
            raise IdentityValidationError(raw, "identity not normalized")
        if len(raw) < self.min_length:
            raise IdentityValidationError(
                raw, f"shorter than {self.min_length} characters"
            )
        if len(raw) > self.max_length:
            raise IdentityValidationError(
                raw, f"longer than {self.max_length} characters"
            )
        if not IDENTITY_PATTERN.fullmatch(raw):
            raise IdentityValidationError(raw, "invalid characters")
        return Identity(raw)
