"""Shared test fixtures for handler-authz tests."""

from __future__ import annotations

import functools

import pytest

from handler_authz.classify._classifiers import MarkerClassifier
from handler_authz.config._config import _reset_global_config
from handler_authz.markers import (
    Marker,
    controller,
    post_authorize,
    pre_authorize,
    secured,
)
from handler_authz.resolver._resolver import PolicyResolver

# ---------------------------------------------------------------------------
# Test handlers
# ---------------------------------------------------------------------------


@controller
class OrderController:
    """Handler type with a mix of marked and unmarked methods."""

    @pre_authorize("isAuthenticated()")
    def show(self, order_id: int) -> str:
        return f"order {order_id}"

    @post_authorize("returnObject.owner == principal")
    def receipt(self, order_id: int) -> str:
        return f"receipt {order_id}"

    @secured("ROLE_ADMIN")
    def cancel(self, order_id: int) -> None:
        return None

    def export(self) -> str:
        return "csv"


@controller
@secured("ROLE_ADMIN")
class AdminController:
    """Handler type covered at the type level."""

    def purge(self) -> None:
        return None

    @pre_authorize("hasRole('ROOT')")
    def reset(self) -> None:
        return None


@controller
class HealthController:
    """Handler type without any marker."""

    def ping(self) -> str:
        return "pong"


class InventoryService:
    """Plain service type: never a handler."""

    def restock(self) -> None:
        return None

    @pre_authorize("hasRole('STOCK')")
    def audit(self) -> None:
        return None


def logged(fn):
    """A functools.wraps decorator, as applications stack on handlers."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        return fn(*args, **kwargs)

    return wrapper


@controller
class WrappedController:
    """Markers below a wrapping decorator must still be found."""

    @logged
    @pre_authorize("isAuthenticated()")
    def listing(self) -> list[str]:
        return []

    @logged
    def unmarked(self) -> None:
        return None


# ---------------------------------------------------------------------------
# Stub collaborators
# ---------------------------------------------------------------------------


class StubClassifier:
    """Classifier answering from a fixed set of handler types."""

    def __init__(self, *handler_types: type) -> None:
        self.handler_types = set(handler_types)
        self.calls: list[object] = []

    def is_handler_component(self, handler_type: type | None) -> bool:
        self.calls.append(handler_type)
        return handler_type in self.handler_types


class StubIntrospector:
    """Introspector answering from a dict of entity -> marker names."""

    def __init__(self, tags: dict[object, set[str]] | None = None) -> None:
        self.tags = tags or {}
        self.calls: list[tuple[object, Marker]] = []

    def has_tag(self, entity: object, marker: Marker) -> bool:
        self.calls.append((entity, marker))
        return marker.name in self.tags.get(entity, set())


class FailingIntrospector:
    """Introspector that fails for one entity."""

    def __init__(self, failing_entity: object) -> None:
        self.failing_entity = failing_entity

    def has_tag(self, entity: object, marker: Marker) -> bool:
        if entity is self.failing_entity:
            raise RuntimeError("metadata unavailable")
        return False


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def resolver() -> PolicyResolver:
    """Resolver classifying by ``@controller`` with the default markers."""
    return PolicyResolver(classifier=MarkerClassifier())
