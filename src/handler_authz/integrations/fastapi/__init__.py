"""FastAPI integration for handler-authz."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install handler-authz[fastapi]"
    ) from exc

from handler_authz.integrations.fastapi._dependencies import (
    HandlerPolicyDep,
    configure_authz,
    enforce_handler_policy,
    get_resolver,
)
from handler_authz.integrations.fastapi._errors import install_error_handlers

__all__ = [
    "HandlerPolicyDep",
    "configure_authz",
    "enforce_handler_policy",
    "get_resolver",
    "install_error_handlers",
]
