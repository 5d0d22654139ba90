"""Shared protocols and type aliases for handler-authz."""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from handler_authz.markers._marker import Marker
    from handler_authz.resolver._decision import ConfigAttribute, Decision

__all__ = [
    "FreeFunctionPolicy",
    "HandlerCallable",
    "HandlerClassifier",
    "Introspector",
    "MethodSecurityMetadataSource",
]

# Valid values for ResolverConfig.free_functions.
FreeFunctionPolicy = Literal["check", "defer"]

# Anything a host framework routes a request to.
HandlerCallable = Callable[..., Any]


@runtime_checkable
class HandlerClassifier(Protocol):
    """Decides whether a type exposes methods reachable by requests.

    Must be a pure, deterministic predicate over type identity.

    Example::

        class AllowList:
            def is_handler_component(self, handler_type: type | None) -> bool:
                return handler_type in {UserController, OrderController}
    """

    def is_handler_component(self, handler_type: type | None) -> bool: ...


@runtime_checkable
class Introspector(Protocol):
    """Reports whether a type or function carries a given marker."""

    def has_tag(self, entity: object, marker: Marker) -> bool: ...


@runtime_checkable
class MethodSecurityMetadataSource(Protocol):
    """The three operations a host authorization framework calls.

    ``list_all_attributes`` and ``list_static_attributes`` exist for
    conformance with enumeration-based callers and return ``None``.
    """

    def resolve(
        self, handler_type: type | None, handler_method: HandlerCallable | None
    ) -> Decision: ...

    def list_all_attributes(self) -> Collection[ConfigAttribute] | None: ...

    def list_static_attributes(
        self, handler_type: type | None
    ) -> Collection[ConfigAttribute] | None: ...
