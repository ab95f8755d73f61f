"""Secure admin configuration.

This module defines configuration for the admin role service with
environment variable overrides for deployment tuning.

Environment Variables:
- SECURE_ADMIN_NAMESPACE: Storage namespace of the admin record (default: admin)
- SECURE_ADMIN_IDENTITY_MIN_LENGTH: Shortest accepted identity (default: 3)
- SECURE_ADMIN_IDENTITY_MAX_LENGTH: Longest accepted identity (default: 64)
- SECURE_ADMIN_ENV: "production" for JSON logs, anything else for console (default: production)
- SECURE_ADMIN_LOG_LEVEL: Minimum level written to the log (default: INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_NAMESPACE = "admin"
DEFAULT_IDENTITY_MIN_LENGTH = 3
DEFAULT_IDENTITY_MAX_LENGTH = 64
DEFAULT_ENVIRONMENT = "production"
DEFAULT_LOG_LEVEL = "INFO"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_level_env(key: str, default: str) -> str:
    value = _get_str_env(key, default).upper()
    if not isinstance(logging.getLevelName(value), int):
        return default
    return value


@dataclass(frozen=True)
class SecureAdminConfig:
    """Configuration for the secure admin service.

    All values can be overridden via environment variables.

    Attributes:
        namespace: Storage namespace of the admin record.
        identity_min_length: Minimum length of a canonical identity.
        identity_max_length: Maximum length of a canonical identity.
        environment: Log renderer selection ("production" for JSON).
        log_level: Name of the minimum stdlib logging level.
    """

    namespace: str = DEFAULT_NAMESPACE
    identity_min_length: int = DEFAULT_IDENTITY_MIN_LENGTH
    identity_max_length: int = DEFAULT_IDENTITY_MAX_LENGTH
    environment: str = DEFAULT_ENVIRONMENT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.namespace:
            raise ValueError("namespace must be a non-empty string")
        if self.identity_min_length < 1:
            raise ValueError(
                f"identity_min_length must be positive, got {self.identity_min_length}"
            )
        if self.identity_max_length < self.identity_min_length:
            raise ValueError(
                f"identity_max_length ({self.identity_max_length}) must be at least "
                f"identity_min_length ({self.identity_min_length})"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")

    @property
    def is_production(self) -> bool:
        """True when logs should be rendered as JSON lines."""
        return self.environment == "production"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_environment(cls) -> SecureAdminConfig:
        """Create config from environment variables with defaults.

        Returns:
            SecureAdminConfig with values from environment or defaults.
        """
        return cls(
            namespace=_get_str_env("SECURE_ADMIN_NAMESPACE", DEFAULT_NAMESPACE),
            identity_min_length=_get_int_env(
                "SECURE_ADMIN_IDENTITY_MIN_LENGTH", DEFAULT_IDENTITY_MIN_LENGTH
            ),
            identity_max_length=_get_int_env(
                "SECURE_ADMIN_IDENTITY_MAX_LENGTH", DEFAULT_IDENTITY_MAX_LENGTH
            ),
            environment=_get_str_env("SECURE_ADMIN_ENV", DEFAULT_ENVIRONMENT),
            log_level=_get_level_env("SECURE_ADMIN_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


# Default production config
DEFAULT_SECURE_ADMIN_CONFIG = SecureAdminConfig()

# Testing config with a dedicated namespace and development logging
TEST_SECURE_ADMIN_CONFIG = SecureAdminConfig(
    namespace="test_admin",
    environment="development",
)
