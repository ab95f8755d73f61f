"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from secure_admin.config.admin_config import SecureAdminConfig
from secure_admin.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_structlog(config: SecureAdminConfig | None = None) -> SecureAdminConfig:
    """Configure structlog from config, or from the environment when omitted.

    Returns:
        The configuration that was applied.
    """
    config = config or SecureAdminConfig.from_environment()
    _configure_structlog(config)
    return config


__all__ = ["configure_structlog"]
