"""Catch-all forwarding route for the relay service.

Every request that is not a preflight or the health probe is reissued to the
upstream origin with method, path and raw query string preserved. The
upstream body is streamed back without decoding or buffering.
"""

from __future__ import annotations

import httpx
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from starlette.background import BackgroundTask
from starlette.responses import Response, StreamingResponse

from freepik_service_libs.error_handling import RelayUpstreamUnreachableError
from freepik_service_libs.logging_utils import create_service_logger
from services.relay_service.config import Settings
from services.relay_service.header_policy import (
    filter_response_headers,
    select_forwarded_headers,
)

router = APIRouter(route_class=DishkaRoute, tags=["Proxy"])
logger = create_service_logger("relay.proxy_routes")

PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


def build_upstream_url(config: Settings, request: Request) -> str:
    url = f"{config.UPSTREAM_BASE_URL.rstrip('/')}{request.url.path}"
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


@router.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy_request(
    path: str,
    request: Request,
    http_client: FromDishka[httpx.AsyncClient],
    config: FromDishka[Settings],
) -> Response:
    """Forward a request to the upstream API and stream the response back.

    Raises:
        RelayUpstreamUnreachableError: The upstream call could not be completed
    """
    if request.method == "OPTIONS":
        return Response(status_code=204)

    url = build_upstream_url(config, request)
    headers = select_forwarded_headers(request.headers)
    content = None if request.method in BODYLESS_METHODS else request.stream()

    logger.info(f"Proxying {request.method} request: {request.url.path}")

    try:
        upstream_request = http_client.build_request(
            method=request.method,
            url=url,
            headers=headers,
            content=content,
        )
        r = await http_client.send(upstream_request, stream=True)
    except httpx.TransportError as e:
        message = str(e) or type(e).__name__
        logger.error(
            f"Error proxying {request.method} request to {request.url.path}: {message}",
            exc_info=True,
        )
        raise RelayUpstreamUnreachableError(
            message, method=request.method, path=request.url.path
        ) from e

    logger.info(
        f"Proxied {request.method} request completed: {request.url.path}, "
        f"status: {r.status_code}"
    )

    response = StreamingResponse(
        r.aiter_raw(),
        status_code=r.status_code,
        background=BackgroundTask(r.aclose),
    )
    response.raw_headers = filter_response_headers(r.headers)
    return response
