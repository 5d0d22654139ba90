"""Tests for FastAPI dependencies (HandlerPolicyDep, configure_authz)."""

from __future__ import annotations

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from handler_authz.classify._classifiers import MarkerClassifier, RegistryClassifier
from handler_authz.config._config import ResolverConfig
from handler_authz.integrations.fastapi import (
    HandlerPolicyDep,
    configure_authz,
    get_resolver,
    install_error_handlers,
)
from handler_authz.markers import controller, pre_authorize, secured
from handler_authz.resolver._resolver import PolicyResolver

# ---------------------------------------------------------------------------
# Test-local handlers
# ---------------------------------------------------------------------------


@controller
class ReportController:
    @pre_authorize("hasRole('ANALYST')")
    def summary(self) -> dict[str, str]:
        return {"report": "summary"}

    def raw(self) -> dict[str, str]:
        return {"report": "raw"}


@controller
@secured("ROLE_ADMIN")
class AdminController:
    def stats(self) -> dict[str, int]:
        return {"users": 3}


class Plain:
    def hello(self) -> dict[str, str]:
        return {"hello": "world"}


def _build_app(resolver: PolicyResolver | None = None) -> FastAPI:
    app = FastAPI(dependencies=[HandlerPolicyDep])
    install_error_handlers(app)
    if resolver is not None:
        configure_authz(app, resolver=resolver)

    @app.get("/health")
    @pre_authorize("permitAll()")
    def health() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/internal")
    def internal() -> dict[str, bool]:
        return {"secret": True}

    reports = ReportController()
    app.add_api_route("/reports/summary", reports.summary, methods=["GET"])
    app.add_api_route("/reports/raw", reports.raw, methods=["GET"])
    app.add_api_route("/admin/stats", AdminController().stats, methods=["GET"])
    app.add_api_route("/plain", Plain().hello, methods=["GET"])
    return app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(_build_app())


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestFreeFunctionEndpoints:
    def test_marked_endpoint_passes(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_unmarked_endpoint_is_forbidden(self, client: TestClient) -> None:
        response = client.get("/internal")
        assert response.status_code == 403
        assert "internal" in response.json()["detail"]

    def test_defer_policy(self) -> None:
        resolver = PolicyResolver(
            classifier=MarkerClassifier(),
            config=ResolverConfig(free_functions="defer"),
        )
        client = TestClient(_build_app(resolver))
        assert client.get("/internal").status_code == 200


class TestBoundMethodEndpoints:
    def test_marked_method_passes(self, client: TestClient) -> None:
        assert client.get("/reports/summary").status_code == 200

    def test_unmarked_method_is_forbidden(self, client: TestClient) -> None:
        assert client.get("/reports/raw").status_code == 403

    def test_type_marker_covers(self, client: TestClient) -> None:
        assert client.get("/admin/stats").json() == {"users": 3}

    def test_non_handler_type_defers(self, client: TestClient) -> None:
        assert client.get("/plain").status_code == 200

    def test_registry_classifier(self) -> None:
        resolver = PolicyResolver(classifier=RegistryClassifier(Plain))
        client = TestClient(_build_app(resolver))
        assert client.get("/plain").status_code == 403


class TestRouterLevelDependency:
    def test_router_dependency_only_guards_router(self) -> None:
        app = FastAPI()
        install_error_handlers(app)
        router = APIRouter(dependencies=[HandlerPolicyDep])

        @router.get("/guarded")
        def guarded() -> dict[str, bool]:
            return {"ok": True}

        @app.get("/open")
        def open_() -> dict[str, bool]:
            return {"ok": True}

        app.include_router(router)
        client = TestClient(app)

        assert client.get("/guarded").status_code == 403
        assert client.get("/open").status_code == 200


class TestResolverState:
    def test_configure_authz_stores_resolver(self) -> None:
        resolver = PolicyResolver(classifier=MarkerClassifier())
        app = FastAPI()
        configure_authz(app, resolver=resolver)
        assert app.state.handler_authz_resolver is resolver

    def test_default_resolver_built_once(self) -> None:
        app = _build_app()
        client = TestClient(app)
        client.get("/health")
        first = app.state.handler_authz_resolver
        client.get("/health")
        assert app.state.handler_authz_resolver is first

    def test_get_resolver_is_overridable(self) -> None:
        app = _build_app()
        app.dependency_overrides[get_resolver] = lambda: PolicyResolver(
            classifier=MarkerClassifier(),
            config=ResolverConfig(free_functions="defer"),
        )
        assert TestClient(app).get("/internal").status_code == 200
