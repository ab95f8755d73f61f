"""Structlog configuration for secure-admin hosts.

Everything is driven by SecureAdminConfig:
- environment "production" renders one JSON object per line, anything
  else uses the structlog console renderer
- log_level filters before any processor runs
- namespace is stamped on entries that do not carry one, so lines from
  adapters and bootstrap code can be attributed to the configured record

A production line for a role update looks like:
    {"event": "admin_updated", "level": "info", "namespace": "admin",
     "service": "SecureAdminService", "operation": "update",
     "request_kind": "AcceptProposed", "sender": "miles", "admin": "miles",
     "proposed": null, "correlation_id": "...", "timestamp": "..."}
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.typing import Processor

from secure_admin.application.correlation import correlation_id_processor
from secure_admin.config.admin_config import SecureAdminConfig


def _namespace_processor(namespace: str) -> Processor:
    def add_namespace(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        event_dict.setdefault("namespace", namespace)
        return event_dict

    return add_namespace


def build_processors(config: SecureAdminConfig) -> list[Processor]:
    """Return the processor chain for config, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _namespace_processor(config.namespace),
        cast(Processor, correlation_id_processor),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if config.is_production:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_structlog(config: SecureAdminConfig) -> None:
    """Configure structlog process-wide. Call once at host startup.

    Args:
        config: Supplies environment, log_level and namespace.
    """
    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
