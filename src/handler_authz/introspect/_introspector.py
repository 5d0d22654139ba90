"""AttributeIntrospector — marker lookup on classes and functions."""

from __future__ import annotations

import inspect
from collections.abc import Iterator

from handler_authz.markers._marker import Marker, MarkerDeclaration, declarations_of

__all__ = ["AttributeIntrospector", "find_declarations"]


def _unwrap_callable(entity: object) -> object:
    if isinstance(entity, (staticmethod, classmethod)):
        return entity.__func__
    if inspect.ismethod(entity):
        return entity.__func__
    return entity


def _function_chain(fn: object) -> Iterator[object]:
    seen: set[int] = set()
    current: object | None = _unwrap_callable(fn)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = getattr(current, "__wrapped__", None)
        if current is not None:
            current = _unwrap_callable(current)


def find_declarations(
    entity: object, *, inherit_type_markers: bool = True
) -> list[MarkerDeclaration]:
    """Collect every declaration visible on *entity*.

    For classes, the MRO is walked most-derived first when
    *inherit_type_markers* is set. For functions, the ``__wrapped__``
    chain left by ``functools.wraps`` is followed.

    Example::

        decls = find_declarations(OrderController)
        print([d.marker.name for d in decls])
    """
    if entity is None:
        return []
    if isinstance(entity, type):
        owners = entity.__mro__ if inherit_type_markers else (entity,)
        return [d for owner in owners for d in declarations_of(owner)]
    return [d for fn in _function_chain(entity) for d in declarations_of(fn)]


class AttributeIntrospector:
    """Looks up markers declared with the ``handler_authz.markers`` decorators.

    Lookup policy:

    - A class carries a marker if it or (with ``inherit_type_markers``)
      any class in its MRO declares it.
    - A function carries a marker if it, or any function reachable
      through ``__wrapped__``, declares it. Bound methods,
      ``staticmethod`` and ``classmethod`` objects are unwrapped first.
    - A method does not inherit markers from the base-class method it
      overrides.
    - Composed markers are flattened when applied, so their
      constituents are found like direct declarations.

    Example::

        introspector = AttributeIntrospector()
        introspector.has_tag(OrderController.show, PRE_AUTHORIZE)
    """

    def __init__(self, *, inherit_type_markers: bool = True) -> None:
        self._inherit_type_markers = inherit_type_markers

    @property
    def inherit_type_markers(self) -> bool:
        return self._inherit_type_markers

    def has_tag(self, entity: object, marker: Marker) -> bool:
        return any(
            d.marker == marker
            for d in find_declarations(entity, inherit_type_markers=self._inherit_type_markers)
        )

    def __repr__(self) -> str:
        return f"AttributeIntrospector(inherit_type_markers={self._inherit_type_markers!r})"
