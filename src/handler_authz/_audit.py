"""Audit logging for resolver decisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from handler_authz.markers._marker import Marker
    from handler_authz.resolver._decision import Decision

__all__ = ["describe", "log_decision", "log_introspection_failure"]

logger = logging.getLogger("handler_authz")


def describe(entity: object) -> str:
    if entity is None:
        return "<none>"
    return getattr(entity, "__qualname__", None) or repr(entity)


def log_decision(
    *,
    handler_type: type | None,
    handler_method: object | None,
    decision: Decision,
    reason: str,
) -> None:
    """Log a resolver decision.

    Logging levels:
    - WARNING: Deny-all fallback applied (no marker on type or method)
    - DEBUG: Deferred, with the reason

    Example::

        log_decision(
            handler_type=OrderController,
            handler_method=OrderController.show,
            decision=DENY_ALL,
            reason="no_marker",
        )
    """
    if decision.is_denied:
        logger.warning(
            "No access-control marker on %s.%s: deny-all applied",
            describe(handler_type),
            getattr(handler_method, "__name__", describe(handler_method)),
        )
        return

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Deferred %s for %s (%s)",
            describe(handler_method),
            describe(handler_type),
            reason,
        )


def log_introspection_failure(
    *,
    entity: object,
    marker: Marker | None,
    exc: BaseException,
) -> None:
    """Log a collaborator failure to ``handler_authz.introspection``."""
    failure_logger = logging.getLogger("handler_authz.introspection")
    failure_logger.error(
        "INTROSPECTION entity=%s marker=%s error=%s: %s",
        describe(entity),
        marker.name if marker is not None else "<classification>",
        type(exc).__name__,
        exc,
    )
