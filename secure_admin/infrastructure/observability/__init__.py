"""Observability infrastructure for structured logging.

Usage:
    from secure_admin.infrastructure.observability import configure_structlog

    configure_structlog(SecureAdminConfig.from_environment())
"""

from secure_admin.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
)

__all__: list[str] = ["build_processors", "configure_structlog"]
