"""Decision types produced by the resolver."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

__all__ = [
    "DEFER",
    "DENY_ALL",
    "DENY_ALL_ATTRIBUTE",
    "ConfigAttribute",
    "Decision",
    "DecisionKind",
]


@enum.unique
class DecisionKind(str, enum.Enum):
    """Outcome category of a resolution.

    Attributes:
        DEFER: No handler-level decision; another layer decides.
        DENY_ALL: Handler-bearing type without any marker; always deny.
        POLICY_ATTRIBUTES: Reserved. Existing markers are left to the
            downstream evaluator and never copied into a decision.
    """

    DEFER = "defer"
    DENY_ALL = "deny_all"
    POLICY_ATTRIBUTES = "policy_attributes"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ConfigAttribute:
    """A single security attribute handed to the host framework."""

    attribute: str


DENY_ALL_ATTRIBUTE = ConfigAttribute("denyAll")


@dataclass(frozen=True, slots=True)
class Decision:
    """Result of resolving one handler.

    Attributes:
        kind: The outcome category.
        attributes: Security attributes for the host framework. Empty
            for ``DEFER``, exactly ``(DENY_ALL_ATTRIBUTE,)`` for ``DENY_ALL``.

    Example::

        decision = resolver.resolve(OrderController, OrderController.show)
        if decision.is_denied:
            abort(403)
    """

    kind: DecisionKind
    attributes: tuple[ConfigAttribute, ...] = ()

    @property
    def is_deferred(self) -> bool:
        return self.kind is DecisionKind.DEFER

    @property
    def is_denied(self) -> bool:
        return self.kind is DecisionKind.DENY_ALL

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "kind": self.kind.value,
            "attributes": [a.attribute for a in self.attributes],
        }

    def __str__(self) -> str:
        return self.kind.value


DEFER = Decision(DecisionKind.DEFER)
DENY_ALL = Decision(DecisionKind.DENY_ALL, (DENY_ALL_ATTRIBUTE,))
