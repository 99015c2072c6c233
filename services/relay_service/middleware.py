"""Middleware for the relay service."""

from __future__ import annotations

from uuid import UUID, uuid4

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from freepik_service_libs.logging_utils import create_service_logger
from services.relay_service.config import Settings
from services.relay_service.header_policy import cross_origin_headers

logger = create_service_logger("relay.middleware")


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure every request has a correlation ID.

    The id is bound into structlog contextvars for the request's log lines and
    echoed back in X-Correlation-ID. It is never forwarded upstream.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        x_correlation_id = request.headers.get("X-Correlation-ID")
        if x_correlation_id:
            try:
                correlation_id = UUID(x_correlation_id)
            except ValueError:
                logger.warning(
                    f"Invalid correlation ID format: {x_correlation_id}, generating new one"
                )
                correlation_id = uuid4()
        else:
            correlation_id = uuid4()

        request.state.correlation_id = correlation_id
        with structlog.contextvars.bound_contextvars(correlation_id=str(correlation_id)):
            response = await call_next(request)

        response.headers["X-Correlation-ID"] = str(correlation_id)
        return response


class CrossOriginHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the fixed cross-origin header set on every response.

    Values overwrite same-named headers already on the response, including
    those copied from upstream.
    """

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self._headers = cross_origin_headers(settings)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers[name] = value
        return response
