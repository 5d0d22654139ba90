"""Flask extension enforcing the deny-by-default handler policy."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flask import Flask, current_app, jsonify, request
from flask.views import View

from handler_authz._handler import HandlerMethod
from handler_authz.classify._classifiers import (
    AnyClassifier,
    MarkerClassifier,
    RegistryClassifier,
)
from handler_authz.config._config import get_global_config
from handler_authz.exceptions import AccessDenied, IntrospectionError
from handler_authz.resolver._decision import Decision
from handler_authz.resolver._resolver import PolicyResolver

__all__ = ["AuthzExtension", "handler_for_view"]


def handler_for_view(view: Any, http_method: str) -> HandlerMethod:
    """Return the handler a Flask view function dispatches *http_method* to.

    Class-based views (those carrying ``view_class``) resolve to the
    method named after the HTTP verb (``get``, ``post``...) with ``HEAD``
    falling back to ``get`` as Flask does, and to ``dispatch_request``
    otherwise. Any other view, bound methods included, resolves to the
    routed callable itself.
    """
    handler = HandlerMethod.from_callable(view)
    view_class = getattr(view, "view_class", None)
    if not isinstance(view_class, type):
        return handler

    verb = http_method.lower()
    if getattr(view_class, verb, None) is None and verb == "head":
        verb = "get"
    if getattr(view_class, verb, None) is not None:
        return HandlerMethod.of(view_class, verb)
    return handler


class AuthzExtension:
    """Flask extension that rejects requests to unmarked handlers.

    Registers a ``before_request`` hook that resolves the matched
    endpoint and raises ``AccessDenied`` when the resolver falls back
    to deny-all, plus error handlers turning ``AccessDenied`` into
    403 and ``IntrospectionError`` into 500.

    Supports the Flask app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        resolver: The resolver to use. Defaults to one that treats every
            ``flask.views.View`` subclass and every ``@controller`` class
            as handler-bearing.
        exempt_endpoints: Endpoints never checked. Defaults to ``("static",)``.

    Example::

        from flask import Flask
        from handler_authz.integrations.flask import AuthzExtension

        app = Flask(__name__)
        AuthzExtension(app)

        @app.get("/health")
        @pre_authorize("permitAll()")
        def health():
            return {"ok": True}

        @app.get("/internal")
        def internal():  # 403: no marker
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        resolver: PolicyResolver | None = None,
        exempt_endpoints: Iterable[str] = ("static",),
    ) -> None:
        self._resolver = resolver
        self._exempt_endpoints = frozenset(exempt_endpoints)

        if app is not None:
            self.init_app(app)

    @staticmethod
    def default_resolver() -> PolicyResolver:
        config = get_global_config()
        return PolicyResolver(
            classifier=AnyClassifier(RegistryClassifier(View), MarkerClassifier.for_config(config)),
            config=config,
        )

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores state on ``app.extensions["handler_authz"]``, installs the
        ``before_request`` hook and the error handlers.

        Args:
            app: The Flask application instance.
        """
        resolver = self._resolver if self._resolver is not None else self.default_resolver()
        app.extensions["handler_authz"] = {
            "resolver": resolver,
            "exempt_endpoints": self._exempt_endpoints,
        }

        app.before_request(self.check_request)

        @app.errorhandler(AccessDenied)
        def handle_access_denied(exc: AccessDenied):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 403

        @app.errorhandler(IntrospectionError)
        def handle_introspection_error(  # pyright: ignore[reportUnusedFunction]
            exc: IntrospectionError,
        ):
            return jsonify({"detail": str(exc)}), 500

    def check_request(self) -> None:
        """``before_request`` hook: resolve the matched endpoint.

        Requests that matched no endpoint are left to Flask's 404/405
        handling.

        Raises:
            AccessDenied: If the endpoint's handler has no marker.
        """
        endpoint = request.endpoint
        if endpoint is None:
            return None

        ext_state: dict[str, Any] = current_app.extensions["handler_authz"]
        if endpoint in ext_state["exempt_endpoints"]:
            return None

        # Flask answers these itself without calling the view.
        rule = request.url_rule
        if request.method == "OPTIONS" and getattr(rule, "provide_automatic_options", False):
            return None

        view = current_app.view_functions.get(endpoint)
        if view is None:
            return None

        handler = handler_for_view(view, request.method)
        resolver: PolicyResolver = ext_state["resolver"]
        decision: Decision = resolver.resolve_handler(handler)
        if decision.is_denied:
            raise AccessDenied(
                handler_type=handler.owner,
                handler_method=handler.function,
                decision=decision,
            )
        return None
