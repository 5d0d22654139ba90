"""Marker identities, declarations and the configured MarkerSet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "AUTHENTICATED",
    "CONTROLLER",
    "DENY_ALL",
    "MARKERS_ATTR",
    "Marker",
    "MarkerDeclaration",
    "MarkerSet",
    "PERMIT_ALL",
    "POST_AUTHORIZE",
    "PRE_AUTHORIZE",
    "ROLES_ALLOWED",
    "SECURED",
    "declarations_of",
]

# Attribute holding the declarations made directly on a class or function.
MARKERS_ATTR = "__authz_markers__"


@dataclass(frozen=True, slots=True)
class Marker:
    """Identity of a metadata tag.

    Two markers are the same marker iff their names are equal.

    Example::

        AUDITED = Marker("audited")
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Marker name must be a non-empty string")

    def __repr__(self) -> str:
        return f"Marker({self.name!r})"


PRE_AUTHORIZE = Marker("pre_authorize")
POST_AUTHORIZE = Marker("post_authorize")
SECURED = Marker("secured")
CONTROLLER = Marker("controller")
AUTHENTICATED = Marker("authenticated")
PERMIT_ALL = Marker("permit_all")
DENY_ALL = Marker("deny_all")
ROLES_ALLOWED = Marker("roles_allowed")


@dataclass(frozen=True, slots=True)
class MarkerDeclaration:
    """A marker attached to a class or function, with its arguments.

    Arguments (expressions, role names) are kept verbatim; they are
    for the downstream evaluator and are never interpreted here.

    Attributes:
        marker: The declared marker.
        args: Positional arguments given to the marker decorator.
        via: Name of the composed marker that contributed this
            declaration, if any.
    """

    marker: Marker
    args: tuple[Any, ...] = ()
    via: str | None = None


@dataclass(frozen=True, slots=True)
class MarkerSet:
    """Immutable set of markers that count as an access-control declaration.

    Established once when a resolver is built and never mutated.

    Example::

        markers = MarkerSet.default().with_markers(AUTHENTICATED, PERMIT_ALL)
        assert SECURED in markers
    """

    markers: frozenset[Marker] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *markers: Marker) -> MarkerSet:
        return cls(frozenset(markers))

    @classmethod
    def default(cls) -> MarkerSet:
        """Pre-authorization, post-authorization and role restriction."""
        return cls.of(PRE_AUTHORIZE, POST_AUTHORIZE, SECURED)

    def with_markers(self, *markers: Marker) -> MarkerSet:
        """Return a new set extended with *markers*."""
        return MarkerSet(self.markers | frozenset(markers))

    def __contains__(self, marker: object) -> bool:
        return marker in self.markers

    def __iter__(self) -> Iterator[Marker]:
        # Sorted so that lookups happen in a stable order.
        return iter(sorted(self.markers, key=lambda m: m.name))

    def __len__(self) -> int:
        return len(self.markers)

    def names(self) -> list[str]:
        return [m.name for m in self]


def declarations_of(entity: object) -> tuple[MarkerDeclaration, ...]:
    """Return the declarations made directly on *entity* (not inherited)."""
    try:
        own = vars(entity)
    except TypeError:
        return ()
    declared: Iterable[MarkerDeclaration] = own.get(MARKERS_ATTR, ())
    return tuple(declared)
