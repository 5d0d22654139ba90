"""Decorators that attach access-control markers to handlers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from handler_authz.markers._marker import (
    AUTHENTICATED,
    CONTROLLER,
    DENY_ALL,
    MARKERS_ATTR,
    PERMIT_ALL,
    POST_AUTHORIZE,
    PRE_AUTHORIZE,
    ROLES_ALLOWED,
    SECURED,
    Marker,
    MarkerDeclaration,
    declarations_of,
)

__all__ = [
    "authenticated",
    "composed",
    "controller",
    "deny_all",
    "mark",
    "permit_all",
    "post_authorize",
    "pre_authorize",
    "roles_allowed",
    "secured",
]

T = TypeVar("T")


def _attach(target: T, declarations: tuple[MarkerDeclaration, ...]) -> T:
    # staticmethod/classmethod wrappers: declare on the underlying function.
    holder: Any = target.__func__ if isinstance(target, (staticmethod, classmethod)) else target
    existing = declarations_of(holder)
    setattr(holder, MARKERS_ATTR, existing + declarations)
    return target


def mark(marker: Marker, *args: Any) -> Callable[[T], T]:
    """Generic marker decorator for classes and functions.

    Example::

        AUDITED = Marker("audited")

        @mark(AUDITED, "finance")
        def export(self): ...
    """

    def decorator(target: T) -> T:
        return _attach(target, (MarkerDeclaration(marker, tuple(args)),))

    return decorator


def pre_authorize(expression: str) -> Callable[[T], T]:
    """Declare a pre-invocation authorization expression.

    Example::

        @pre_authorize("isAuthenticated()")
        def show(self, order_id): ...
    """
    return mark(PRE_AUTHORIZE, expression)


def post_authorize(expression: str) -> Callable[[T], T]:
    """Declare a post-invocation authorization expression."""
    return mark(POST_AUTHORIZE, expression)


def secured(*roles: str) -> Callable[[T], T]:
    """Restrict a handler to the given roles.

    Example::

        @controller
        @secured("ROLE_ADMIN")
        class AdminController: ...
    """
    return mark(SECURED, *roles)


def roles_allowed(*roles: str) -> Callable[[T], T]:
    return mark(ROLES_ALLOWED, *roles)


def controller(cls: type[T]) -> type[T]:
    """Tag a class as a request-handling component."""
    return _attach(cls, (MarkerDeclaration(CONTROLLER),))


def authenticated(target: T) -> T:
    """Shorthand marker: any authenticated caller."""
    return _attach(target, (MarkerDeclaration(AUTHENTICATED),))


def permit_all(target: T) -> T:
    """Shorthand marker: public handler."""
    return _attach(target, (MarkerDeclaration(PERMIT_ALL),))


def deny_all(target: T) -> T:
    """Shorthand marker: explicitly closed handler."""
    return _attach(target, (MarkerDeclaration(DENY_ALL),))


def composed(name: str, *decorators: Callable[[Any], Any]) -> Callable[[T], T]:
    """Build a composed marker out of other marker decorators.

    Applying the result attaches ``Marker(name)`` together with every
    declaration the constituent decorators make, each recorded with
    ``via=name``. Composition is flattened when applied, so a lookup
    for a constituent marker finds it directly.

    Example::

        admin_only = composed("admin_only", secured("ROLE_ADMIN"), authenticated)

        @admin_only
        def purge(self): ...
    """
    own = Marker(name)

    def decorator(target: T) -> T:
        class _Probe:
            pass

        for apply in decorators:
            apply(_Probe)
        collected = tuple(
            MarkerDeclaration(d.marker, d.args, via=d.via or name) for d in declarations_of(_Probe)
        )
        return _attach(target, (MarkerDeclaration(own), *collected))

    return decorator
