"""Handler classifiers — which types expose request handlers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from handler_authz._types import HandlerClassifier, Introspector
from handler_authz.introspect._introspector import AttributeIntrospector
from handler_authz.markers._marker import CONTROLLER, Marker

if TYPE_CHECKING:
    from handler_authz.config._config import ResolverConfig

__all__ = [
    "AnyClassifier",
    "MarkerClassifier",
    "NamingClassifier",
    "RegistryClassifier",
]


class MarkerClassifier:
    """A type is a handler iff it carries the controller marker.

    The marker is looked up through the given introspector, so a
    subclass of a ``@controller`` class is a handler as well unless the
    introspector disables type-marker inheritance (see ``for_config``).

    Example::

        @controller
        class OrderController: ...

        MarkerClassifier().is_handler_component(OrderController)  # True
    """

    def __init__(
        self,
        marker: Marker = CONTROLLER,
        *,
        introspector: Introspector | None = None,
    ) -> None:
        self._marker = marker
        self._introspector = introspector if introspector is not None else AttributeIntrospector()

    @classmethod
    def for_config(cls, config: ResolverConfig, marker: Marker = CONTROLLER) -> MarkerClassifier:
        """Build a classifier whose marker lookup follows *config*.

        With ``inherit_type_markers=False`` a subclass of a ``@controller``
        class is no longer a handler either, matching how the resolver
        treats access-control markers under the same config.
        """
        introspector = AttributeIntrospector(inherit_type_markers=config.inherit_type_markers)
        return cls(marker, introspector=introspector)

    def is_handler_component(self, handler_type: type | None) -> bool:
        if handler_type is None:
            return False
        return self._introspector.has_tag(handler_type, self._marker)

    def __repr__(self) -> str:
        return f"MarkerClassifier({self._marker!r})"


class RegistryClassifier:
    """Explicit registration list of handler types.

    Subclasses of a registered type are handlers too.

    Example::

        handlers = RegistryClassifier()

        @handlers.register
        class ReportResource: ...
    """

    def __init__(self, *handler_types: type) -> None:
        self._types: list[type] = list(handler_types)

    def register(self, handler_type: type) -> type:
        """Register *handler_type*. Usable as a class decorator."""
        if handler_type not in self._types:
            self._types.append(handler_type)
        return handler_type

    def registered(self) -> tuple[type, ...]:
        return tuple(self._types)

    def is_handler_component(self, handler_type: type | None) -> bool:
        if handler_type is None:
            return False
        return any(issubclass(handler_type, t) for t in self._types)


class NamingClassifier:
    """Naming convention: the class name ends with one of *suffixes*."""

    def __init__(self, suffixes: Iterable[str] = ("Controller", "Resource", "View")) -> None:
        self._suffixes = tuple(suffixes)
        if not self._suffixes:
            raise ValueError("NamingClassifier requires at least one suffix")

    def is_handler_component(self, handler_type: type | None) -> bool:
        if handler_type is None:
            return False
        return handler_type.__name__.endswith(self._suffixes)


class AnyClassifier:
    """OR-composition of several classifiers."""

    def __init__(self, *classifiers: HandlerClassifier) -> None:
        self._classifiers = classifiers

    def is_handler_component(self, handler_type: type | None) -> bool:
        return any(c.is_handler_component(handler_type) for c in self._classifiers)
