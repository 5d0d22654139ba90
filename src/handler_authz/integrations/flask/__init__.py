"""Flask integration for handler-authz."""

from __future__ import annotations

try:
    import flask as _flask_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _flask_check
except ImportError as exc:
    raise ImportError(
        "Flask integration requires flask. Install it with: pip install handler-authz[flask]"
    ) from exc

from handler_authz.integrations.flask._extension import AuthzExtension, handler_for_view

__all__ = ["AuthzExtension", "handler_for_view"]
