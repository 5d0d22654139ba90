"""HandlerMethod — descriptor of the callable a request is routed to."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from handler_authz._types import HandlerCallable

__all__ = ["HandlerMethod"]


@dataclass(frozen=True, slots=True)
class HandlerMethod:
    """Owning type and function of a request handler.

    Built fresh for every authorization check and discarded afterwards.

    Attributes:
        owner: The declaring type, or ``None`` for a free function.
        function: The function that will run, or ``None`` when it could
            not be identified.
        name: The handler name, used for messages only.

    Example::

        handler = HandlerMethod.of(OrderController, "show")
        decision = resolver.resolve_handler(handler)
    """

    owner: type | None
    function: HandlerCallable | None
    name: str

    @classmethod
    def of(cls, owner: type, name: str) -> HandlerMethod:
        """Look up *name* on *owner*. A missing attribute gives ``function=None``."""
        function = inspect.getattr_static(owner, name, None)
        if isinstance(function, (staticmethod, classmethod)):
            function = function.__func__
        return cls(owner=owner, function=function if callable(function) else None, name=name)

    @classmethod
    def from_callable(cls, fn: HandlerCallable) -> HandlerMethod:
        """Build a descriptor from whatever a router holds for an endpoint.

        - bound method: owner is the class of the bound instance
          (or the class itself for a classmethod);
        - class-based view function carrying ``view_class``: owner is
          that class and the function is its ``dispatch_request``;
        - plain function: no owner.
        """
        if inspect.ismethod(fn):
            bound_to = fn.__self__
            owner = bound_to if isinstance(bound_to, type) else type(bound_to)
            return cls(owner=owner, function=fn.__func__, name=fn.__name__)

        view_class = getattr(fn, "view_class", None)
        if isinstance(view_class, type):
            return cls.of(view_class, "dispatch_request")

        return cls(owner=None, function=fn, name=getattr(fn, "__name__", repr(fn)))
