"""PolicyResolver — fail-closed coverage check for request handlers."""

from __future__ import annotations

from collections.abc import Collection

from handler_authz._audit import log_decision, log_introspection_failure
from handler_authz._handler import HandlerMethod
from handler_authz._types import HandlerCallable, HandlerClassifier, Introspector
from handler_authz.config._config import ResolverConfig, get_global_config
from handler_authz.exceptions import IntrospectionError
from handler_authz.introspect._introspector import AttributeIntrospector
from handler_authz.markers._marker import Marker, MarkerSet
from handler_authz.resolver._decision import DEFER, DENY_ALL, ConfigAttribute, Decision

__all__ = ["PolicyResolver"]


class PolicyResolver:
    """Denies every handler that declares no access-control marker.

    For a handler-bearing type, the handler is covered when any marker
    of the configured ``MarkerSet`` is present on the type or on the
    method. Covered handlers get ``DEFER`` so that the downstream
    evaluator interprets the markers; uncovered ones get ``DENY_ALL``.
    Types the classifier does not recognise always get ``DEFER``.

    Instances hold only immutable configuration and are safe to share
    between threads.

    Args:
        classifier: Decides whether a type is a request-handling component.
        introspector: Marker lookup. Defaults to ``AttributeIntrospector``.
        markers: Markers that count as coverage. Defaults to
            ``config.markers``.
        config: Resolver configuration. Defaults to the global config
            at construction time.

    Example::

        resolver = PolicyResolver(classifier=MarkerClassifier())
        decision = resolver.resolve(OrderController, OrderController.show)
    """

    def __init__(
        self,
        *,
        classifier: HandlerClassifier,
        introspector: Introspector | None = None,
        markers: MarkerSet | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._config = config if config is not None else get_global_config()
        self._classifier = classifier
        self._introspector = (
            introspector
            if introspector is not None
            else AttributeIntrospector(inherit_type_markers=self._config.inherit_type_markers)
        )
        self._markers = markers if markers is not None else self._config.markers

    @property
    def markers(self) -> MarkerSet:
        return self._markers

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(
        self,
        handler_type: type | None,
        handler_method: HandlerCallable | None,
    ) -> Decision:
        """Resolve the decision for *handler_method* declared on *handler_type*.

        A ``None`` *handler_type* is a free function and is handled per
        ``ResolverConfig.free_functions``. A ``None`` *handler_method*
        on a handler-bearing type counts as uncovered.

        Raises:
            IntrospectionError: If the classifier or introspector fails.
        """
        if handler_type is None:
            if self._config.free_functions == "defer":
                return self._decide(handler_type, handler_method, DEFER, "free_function")
            if self.method_has_markers(handler_method):
                return self._decide(handler_type, handler_method, DEFER, "method_marker")
            return self._decide(handler_type, handler_method, DENY_ALL, "no_marker")

        if not self._is_handler(handler_type):
            return self._decide(handler_type, handler_method, DEFER, "not_a_handler")

        if self.type_has_markers(handler_type):
            return self._decide(handler_type, handler_method, DEFER, "type_marker")

        if self.method_has_markers(handler_method):
            return self._decide(handler_type, handler_method, DEFER, "method_marker")

        return self._decide(handler_type, handler_method, DENY_ALL, "no_marker")

    def resolve_handler(self, handler: HandlerMethod) -> Decision:
        return self.resolve(handler.owner, handler.function)

    def type_has_markers(self, handler_type: type | None) -> bool:
        """True iff any configured marker is present on *handler_type*."""
        return any(self._has_tag(handler_type, marker) for marker in self._markers)

    def method_has_markers(self, handler_method: HandlerCallable | None) -> bool:
        """True iff any configured marker is present on *handler_method*."""
        return any(self._has_tag(handler_method, marker) for marker in self._markers)

    def list_all_attributes(self) -> Collection[ConfigAttribute] | None:
        """Always ``None``.

        This resolver only takes part in the per-method fallback
        decision. Hosts that need every attribute enumerated up front
        cannot use it.
        """
        return None

    def list_static_attributes(
        self, handler_type: type | None
    ) -> Collection[ConfigAttribute] | None:
        """Always ``None``; see :meth:`list_all_attributes`."""
        return None

    def _is_handler(self, handler_type: type) -> bool:
        try:
            return bool(self._classifier.is_handler_component(handler_type))
        except IntrospectionError:
            raise
        except Exception as exc:
            log_introspection_failure(entity=handler_type, marker=None, exc=exc)
            raise IntrospectionError(entity=handler_type) from exc

    def _has_tag(self, entity: object, marker: Marker) -> bool:
        if entity is None:
            return False
        try:
            return bool(self._introspector.has_tag(entity, marker))
        except IntrospectionError:
            raise
        except Exception as exc:
            log_introspection_failure(entity=entity, marker=marker, exc=exc)
            raise IntrospectionError(entity=entity, marker=marker) from exc

    def _decide(
        self,
        handler_type: type | None,
        handler_method: HandlerCallable | None,
        decision: Decision,
        reason: str,
    ) -> Decision:
        if self._config.log_decisions:
            log_decision(
                handler_type=handler_type,
                handler_method=handler_method,
                decision=decision,
                reason=reason,
            )
        return decision

    def __repr__(self) -> str:
        return (
            f"PolicyResolver(classifier={self._classifier!r}, "
            f"markers={self._markers.names()!r})"
        )
