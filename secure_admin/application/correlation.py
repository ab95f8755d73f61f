"""Correlation ids for admin requests.

A host handling one admin message wraps the call in correlation_scope()
so every log line the service emits for it carries the same id. The
previous id is restored on exit, so scopes nest.

Usage:
    with correlation_scope(envelope_id):
        service.update(sender, request)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means no scope is active
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the active correlation id, or an empty string outside a scope."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Activate a correlation id for the duration of the block.

    Args:
        correlation_id: Id to activate. A fresh UUID4 is generated when
            omitted or empty.

    Yields:
        The active correlation id.
    """
    active = correlation_id or generate_correlation_id()
    token = _correlation_id.set(active)
    try:
        yield active
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor stamping the active correlation id.

    An id already bound on the logger wins over the context one.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
