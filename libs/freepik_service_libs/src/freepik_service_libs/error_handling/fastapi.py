"""FastAPI integration for the Freepik Icons error taxonomy."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from freepik_service_libs.error_handling.exceptions import (
    FreepikError,
    RelayUpstreamUnreachableError,
)
from freepik_service_libs.logging_utils import create_service_logger

logger = create_service_logger("freepik_service_libs.error_handling.fastapi")

GATEWAY_FAILURE_STATUS = 502


def register_error_handlers(app: FastAPI) -> None:
    """Register JSON renderers for FreepikError subclasses on the app."""

    @app.exception_handler(RelayUpstreamUnreachableError)
    async def handle_upstream_unreachable(
        request: Request, exc: RelayUpstreamUnreachableError
    ) -> JSONResponse:
        logger.warning(
            "Upstream unreachable",
            extra={"method": request.method, "path": request.url.path, "error": str(exc)},
        )
        return JSONResponse(status_code=GATEWAY_FAILURE_STATUS, content={"error": str(exc)})

    @app.exception_handler(FreepikError)
    async def handle_freepik_error(request: Request, exc: FreepikError) -> JSONResponse:
        logger.error(
            f"Unhandled {type(exc).__name__}: {exc}",
            extra={"path": request.url.path, "error_code": exc.error_code.value},
        )
        return JSONResponse(status_code=500, content=exc.to_dict())
