"""handler-authz — secure-by-default authorization for request handlers.

Any handler on a request-handling class that carries no access-control
marker is denied instead of implicitly allowed. Handlers that do carry
one are left to the evaluator that understands the marker.

Example::

    from handler_authz import PolicyResolver, MarkerClassifier, controller, pre_authorize

    @controller
    class OrderController:
        @pre_authorize("isAuthenticated()")
        def show(self, order_id): ...

        def export(self): ...

    resolver = PolicyResolver(classifier=MarkerClassifier())
    resolver.resolve(OrderController, OrderController.show)    # DEFER
    resolver.resolve(OrderController, OrderController.export)  # DENY_ALL
"""

from importlib.metadata import PackageNotFoundError, version

from handler_authz._checks import enforce, get_default_resolver, is_denied
from handler_authz._handler import HandlerMethod
from handler_authz.classify._classifiers import (
    AnyClassifier,
    MarkerClassifier,
    NamingClassifier,
    RegistryClassifier,
)
from handler_authz.config._config import ResolverConfig, configure
from handler_authz.exceptions import AccessDenied, AuthzError, IntrospectionError
from handler_authz.introspect._introspector import AttributeIntrospector
from handler_authz.markers import (
    Marker,
    MarkerSet,
    authenticated,
    composed,
    controller,
    deny_all,
    mark,
    permit_all,
    post_authorize,
    pre_authorize,
    roles_allowed,
    secured,
)
from handler_authz.resolver import DEFER, DENY_ALL, Decision, DecisionKind, PolicyResolver

try:
    __version__ = version("handler-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AccessDenied",
    "AnyClassifier",
    "AttributeIntrospector",
    "AuthzError",
    "DEFER",
    "DENY_ALL",
    "Decision",
    "DecisionKind",
    "HandlerMethod",
    "IntrospectionError",
    "Marker",
    "MarkerClassifier",
    "MarkerSet",
    "NamingClassifier",
    "PolicyResolver",
    "RegistryClassifier",
    "ResolverConfig",
    "authenticated",
    "composed",
    "configure",
    "controller",
    "deny_all",
    "enforce",
    "get_default_resolver",
    "is_denied",
    "mark",
    "permit_all",
    "post_authorize",
    "pre_authorize",
    "roles_allowed",
    "secured",
]
