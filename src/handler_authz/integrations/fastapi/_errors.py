"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from handler_authz.exceptions import AccessDenied, IntrospectionError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for handler-authz errors on a FastAPI app.

    - ``AccessDenied`` -> 403 Forbidden
    - ``IntrospectionError`` -> 500 Internal Server Error

    Args:
        app: The FastAPI application instance.

    Example::

        app = FastAPI(dependencies=[HandlerPolicyDep])
        install_error_handlers(app)
    """

    @app.exception_handler(AccessDenied)
    async def access_denied_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AccessDenied
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={"detail": str(exc)},
        )

    @app.exception_handler(IntrospectionError)
    async def introspection_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: IntrospectionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
