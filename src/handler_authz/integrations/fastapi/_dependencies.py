"""FastAPI dependencies enforcing the deny-by-default handler policy."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from handler_authz._handler import HandlerMethod
from handler_authz.classify._classifiers import MarkerClassifier
from handler_authz.config._config import get_global_config
from handler_authz.exceptions import AccessDenied
from handler_authz.resolver._decision import DENY_ALL, Decision
from handler_authz.resolver._resolver import PolicyResolver

__all__ = ["HandlerPolicyDep", "configure_authz", "enforce_handler_policy", "get_resolver"]


def configure_authz(app: Any, *, resolver: PolicyResolver) -> None:
    """Store the resolver used by ``HandlerPolicyDep`` on the app state.

    Args:
        app: The FastAPI application instance.
        resolver: The resolver to use for every routed endpoint.

    Example::

        app = FastAPI(dependencies=[HandlerPolicyDep])
        configure_authz(app, resolver=PolicyResolver(classifier=MarkerClassifier()))
    """
    app.state.handler_authz_resolver = resolver


def get_resolver(request: Request) -> PolicyResolver:
    """Return the configured resolver, building a default one on first use.

    The default classifies handler types by the ``@controller`` marker;
    plain endpoint functions are free functions and are checked per
    ``ResolverConfig.free_functions``.
    """
    resolver: PolicyResolver | None = getattr(
        request.app.state, "handler_authz_resolver", None
    )
    if resolver is None:
        config = get_global_config()
        resolver = PolicyResolver(classifier=MarkerClassifier.for_config(config), config=config)
        request.app.state.handler_authz_resolver = resolver
    return resolver


def enforce_handler_policy(
    request: Request,
    resolver: PolicyResolver = Depends(get_resolver),
) -> Decision:
    """Resolve the matched endpoint and raise on deny-all.

    Bound-method endpoints are checked against their class; plain
    functions as free functions. A request without an identifiable
    endpoint is denied.

    Raises:
        AccessDenied: If the endpoint carries no access-control marker.

    Example::

        app = FastAPI(dependencies=[HandlerPolicyDep])
        install_error_handlers(app)
    """
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        raise AccessDenied(handler_type=None, handler_method=None, decision=DENY_ALL)

    handler = HandlerMethod.from_callable(endpoint)
    decision = resolver.resolve_handler(handler)
    if decision.is_denied:
        raise AccessDenied(
            handler_type=handler.owner,
            handler_method=handler.function,
            decision=decision,
        )
    return decision


# App- or router-level dependency: FastAPI(dependencies=[HandlerPolicyDep]).
HandlerPolicyDep = Depends(enforce_handler_policy)
