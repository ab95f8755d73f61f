"""Logging mixin for namespace-bound admin services.

Every service in this package guards exactly one storage namespace and
handles typed request objects, so the logger is bound to the namespace
once and each request gets a child logger describing it.

Usage:
    class MyService(LoggingMixin):
        def __init__(self, namespace: str) -> None:
            self._init_logger(namespace)

        def handle(self, sender: Identity, request: object) -> None:
            log = self._log_request("handle", request, sender=sender)
            log.info("request_handled")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from secure_admin.application.correlation import get_correlation_id

if TYPE_CHECKING:
    from secure_admin.domain.models.identity import Identity


class LoggingMixin:
    """Mixin providing structured logging for admin services.

    Bound for the lifetime of the service:
    - service: class name
    - component: "access_control" unless overridden
    - namespace: the guarded storage namespace

    Bound per request by _log_request():
    - operation, request_kind and, when known, sender
    - correlation_id, when a correlation scope is active

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, namespace: str, component: str = "access_control") -> None:
        """Bind the service logger. Call from __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
            namespace=namespace,
        )

    def _log_request(
        self,
        operation: str,
        request: object,
        sender: Identity | None = None,
    ) -> structlog.BoundLogger:
        """Return a logger describing one request.

        Args:
            operation: Service operation handling the request.
            request: The request object; its class name is logged.
            sender: Authenticated caller, if the operation has one.

        Returns:
            BoundLogger for the request.
        """
        context: dict[str, object] = {
            "operation": operation,
            "request_kind": type(request).__name__,
        }
        if sender is not None:
            context["sender"] = str(sender)
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(**context)
