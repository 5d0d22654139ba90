"""Exception hierarchy for handler-authz."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from handler_authz.markers._marker import Marker
    from handler_authz.resolver._decision import Decision

__all__ = [
    "AccessDenied",
    "AuthzError",
    "IntrospectionError",
]


def _describe(entity: object) -> str:
    if entity is None:
        return "<none>"
    qualname = getattr(entity, "__qualname__", None)
    if qualname is not None:
        return f"{getattr(entity, '__module__', '?')}.{qualname}"
    return repr(entity)


class AuthzError(Exception):
    """Base exception for all handler-authz errors."""


class IntrospectionError(AuthzError):
    """A classifier or introspector could not answer.

    The resolver never treats such a failure as coverage or as a
    denial; it surfaces to the caller instead.

    Attributes:
        entity: The type or function being inspected.
        marker: The marker being looked up, or ``None`` for a
            classification query.

    Example::

        try:
            resolver.resolve(OrderController, OrderController.list)
        except IntrospectionError as exc:
            print(f"could not inspect {exc.entity!r}")
    """

    def __init__(
        self,
        *,
        entity: object,
        marker: Marker | None = None,
        message: str | None = None,
    ) -> None:
        self.entity = entity
        self.marker = marker
        if message is None:
            if marker is None:
                message = f"Could not classify {_describe(entity)}"
            else:
                message = f"Could not look up marker {marker.name!r} on {_describe(entity)}"
        super().__init__(message)


class AccessDenied(AuthzError):  # noqa: N818
    """A handler without any access-control marker was invoked.

    Raised by :func:`~handler_authz.enforce` and the framework
    integrations when the resolver returns the deny-all decision.

    Attributes:
        handler_type: The owning type, or ``None`` for a free function.
        handler_method: The invoked function, or ``None`` if unknown.
        decision: The decision that caused the denial.

    Example::

        try:
            enforce(ReportController, ReportController.export)
        except AccessDenied as exc:
            return 403, str(exc)
    """

    def __init__(
        self,
        *,
        handler_type: type | None,
        handler_method: object | None,
        decision: Decision,
        message: str | None = None,
    ) -> None:
        self.handler_type = handler_type
        self.handler_method = handler_method
        self.decision = decision
        if message is None:
            target = _describe(handler_method) if handler_method is not None else "<unknown>"
            message = f"Access to {target} is denied: no access-control marker declared"
        super().__init__(message)
