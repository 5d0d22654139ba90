"""Point checks — is_denied() and enforce() for a single handler."""

from __future__ import annotations

from handler_authz._types import HandlerCallable
from handler_authz.classify._classifiers import MarkerClassifier
from handler_authz.config._config import get_global_config
from handler_authz.exceptions import AccessDenied
from handler_authz.resolver._decision import Decision
from handler_authz.resolver._resolver import PolicyResolver

__all__ = ["enforce", "get_default_resolver", "is_denied"]

_default_resolver: PolicyResolver | None = None


def get_default_resolver() -> PolicyResolver:
    """Return the resolver used when none is passed explicitly.

    It classifies handlers by the ``@controller`` marker and follows
    the global config; it is rebuilt whenever ``configure()`` changed
    the global config since the last call.

    Example::

        configure(log_decisions=True)
        resolver = get_default_resolver()
    """
    global _default_resolver
    config = get_global_config()
    if _default_resolver is None or _default_resolver.config is not config:
        _default_resolver = PolicyResolver(
            classifier=MarkerClassifier.for_config(config), config=config
        )
    return _default_resolver


def is_denied(
    handler_type: type | None,
    handler_method: HandlerCallable | None,
    *,
    resolver: PolicyResolver | None = None,
) -> bool:
    """Check whether the handler falls back to deny-all.

    Args:
        handler_type: The owning type, or ``None`` for a free function.
        handler_method: The function about to be invoked.
        resolver: Optional resolver. Defaults to ``get_default_resolver()``.

    Returns:
        ``True`` if the handler carries no access-control marker.

    Example::

        if is_denied(OrderController, OrderController.show):
            abort(403)
    """
    target = resolver if resolver is not None else get_default_resolver()
    return target.resolve(handler_type, handler_method).is_denied


def enforce(
    handler_type: type | None,
    handler_method: HandlerCallable | None,
    *,
    resolver: PolicyResolver | None = None,
    message: str | None = None,
) -> Decision:
    """Resolve the handler and raise if it falls back to deny-all.

    Raises:
        AccessDenied: If the decision is ``DENY_ALL``.
        IntrospectionError: If a collaborator fails.

    Returns:
        The ``DEFER`` decision, for the host to continue with.

    Example::

        enforce(OrderController, OrderController.show)  # raises if unmarked
    """
    target = resolver if resolver is not None else get_default_resolver()
    decision = target.resolve(handler_type, handler_method)
    if decision.is_denied:
        raise AccessDenied(
            handler_type=handler_type,
            handler_method=handler_method,
            decision=decision,
            message=message,
        )
    return decision
