"""Tests for classify/_classifiers.py — handler classifiers."""

from __future__ import annotations

import pytest

from handler_authz._types import HandlerClassifier
from handler_authz.classify import (
    AnyClassifier,
    MarkerClassifier,
    NamingClassifier,
    RegistryClassifier,
)
from handler_authz.config import ResolverConfig
from handler_authz.markers import Marker, mark
from tests.conftest import (
    AdminController,
    InventoryService,
    OrderController,
    StubIntrospector,
)


class TestMarkerClassifier:
    def test_controller_marker(self) -> None:
        assert MarkerClassifier().is_handler_component(OrderController)

    def test_plain_type(self) -> None:
        assert not MarkerClassifier().is_handler_component(InventoryService)

    def test_subclass_of_controller(self) -> None:
        class SpecialOrders(OrderController):
            pass

        assert MarkerClassifier().is_handler_component(SpecialOrders)

    def test_for_config_without_type_inheritance(self) -> None:
        class SpecialOrders(OrderController):
            pass

        classifier = MarkerClassifier.for_config(ResolverConfig(inherit_type_markers=False))
        assert classifier.is_handler_component(OrderController)
        assert not classifier.is_handler_component(SpecialOrders)

    def test_for_config_default_inherits(self) -> None:
        class SpecialOrders(OrderController):
            pass

        classifier = MarkerClassifier.for_config(ResolverConfig())
        assert classifier.is_handler_component(SpecialOrders)

    def test_custom_marker(self) -> None:
        resource = Marker("resource")

        @mark(resource)
        class Reports:
            pass

        assert MarkerClassifier(resource).is_handler_component(Reports)
        assert not MarkerClassifier().is_handler_component(Reports)

    def test_custom_introspector(self) -> None:
        introspector = StubIntrospector({InventoryService: {"controller"}})
        assert MarkerClassifier(introspector=introspector).is_handler_component(InventoryService)

    def test_none(self) -> None:
        assert not MarkerClassifier().is_handler_component(None)


class TestRegistryClassifier:
    def test_registered_type(self) -> None:
        assert RegistryClassifier(InventoryService).is_handler_component(InventoryService)

    def test_unregistered_type(self) -> None:
        assert not RegistryClassifier(InventoryService).is_handler_component(OrderController)

    def test_subclass_of_registered(self) -> None:
        class Child(InventoryService):
            pass

        assert RegistryClassifier(InventoryService).is_handler_component(Child)

    def test_register_as_decorator(self) -> None:
        handlers = RegistryClassifier()

        @handlers.register
        class Reports:
            pass

        assert handlers.is_handler_component(Reports)
        assert handlers.registered() == (Reports,)

    def test_register_is_idempotent(self) -> None:
        handlers = RegistryClassifier(InventoryService)
        handlers.register(InventoryService)
        assert handlers.registered() == (InventoryService,)

    def test_none(self) -> None:
        assert not RegistryClassifier(InventoryService).is_handler_component(None)


class TestNamingClassifier:
    @pytest.mark.parametrize(
        ("handler_type", "expected"),
        [(OrderController, True), (AdminController, True), (InventoryService, False)],
    )
    def test_default_suffixes(self, handler_type: type, expected: bool) -> None:
        assert NamingClassifier().is_handler_component(handler_type) is expected

    def test_custom_suffixes(self) -> None:
        assert NamingClassifier(("Service",)).is_handler_component(InventoryService)

    def test_empty_suffixes_rejected(self) -> None:
        with pytest.raises(ValueError):
            NamingClassifier(())

    def test_none(self) -> None:
        assert not NamingClassifier().is_handler_component(None)


class TestAnyClassifier:
    def test_or_composition(self) -> None:
        classifier = AnyClassifier(MarkerClassifier(), RegistryClassifier(InventoryService))
        assert classifier.is_handler_component(OrderController)
        assert classifier.is_handler_component(InventoryService)

    def test_nothing_matches(self) -> None:
        classifier = AnyClassifier(RegistryClassifier(OrderController))
        assert not classifier.is_handler_component(InventoryService)

    def test_empty(self) -> None:
        assert not AnyClassifier().is_handler_component(OrderController)


@pytest.mark.parametrize(
    "classifier",
    [MarkerClassifier(), RegistryClassifier(), NamingClassifier(), AnyClassifier()],
)
def test_satisfies_protocol(classifier: object) -> None:
    assert isinstance(classifier, HandlerClassifier)
