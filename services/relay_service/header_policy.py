"""Header rules for the relay.

Inbound request headers pass through an explicit allow-list; everything else
(cookies, host, custom headers) stays at the edge. Upstream response headers
are kept except hop-by-hop headers, then the fixed cross-origin set is laid
over them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import httpx

from services.relay_service.config import Settings

# Request headers forwarded upstream, lowercase
FORWARDED_REQUEST_HEADERS: tuple[str, ...] = (
    "x-freepik-api-key",
    "content-type",
)

HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    }
)


def select_forwarded_headers(
    headers: Mapping[str, str],
    allowed: Iterable[str] = FORWARDED_REQUEST_HEADERS,
) -> dict[str, str]:
    """Return only the allow-listed headers present on the inbound request."""
    forwarded: dict[str, str] = {}
    for name in allowed:
        value = headers.get(name)
        if value:
            forwarded[name] = value
    return forwarded


def filter_response_headers(headers: httpx.Headers) -> list[tuple[bytes, bytes]]:
    """Drop hop-by-hop headers from an upstream response.

    Returns raw ASGI header pairs with lowercase names. Repeated headers such as
    Set-Cookie stay as separate pairs.
    """
    return [
        (name.lower(), value)
        for name, value in headers.raw
        if name.lower().decode("latin-1") not in HOP_BY_HOP_HEADERS
    ]


def cross_origin_headers(config: Settings) -> dict[str, str]:
    """Build the fixed cross-origin header set applied to every relay response."""
    return {
        "Access-Control-Allow-Origin": config.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ", ".join(config.CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(config.CORS_ALLOW_HEADERS),
        "Access-Control-Max-Age": str(config.CORS_MAX_AGE_SECONDS),
    }
