from __future__ import annotations

import httpx
import pytest
from httpx import AsyncClient, Response
from respx import MockRouter

from services.relay_service.tests.test_provider import UPSTREAM

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, OPTIONS",
    "access-control-allow-headers": "Content-Type, x-freepik-api-key",
    "access-control-max-age": "86400",
}


def assert_cross_origin_headers(response: httpx.Response) -> None:
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


@pytest.mark.asyncio
@pytest.mark.respx(assert_all_called=False)
async def test_preflight_answers_locally(client: AsyncClient, respx_mock: MockRouter):
    upstream = respx_mock.route()

    response = await client.options(
        "/v1/icons", headers={"Access-Control-Request-Method": "GET"}
    )

    assert response.status_code == 204
    assert response.content == b""
    assert_cross_origin_headers(response)
    assert not upstream.called


@pytest.mark.asyncio
async def test_get_is_forwarded_with_path_and_query(client: AsyncClient, respx_mock: MockRouter):
    upstream_url = f"{UPSTREAM}/v1/icons?term=camera&per_page=20"
    route = respx_mock.get(upstream_url).mock(
        return_value=Response(200, json={"data": [], "meta": {}})
    )

    response = await client.get(
        "/v1/icons?term=camera&per_page=20", headers={"x-freepik-api-key": "secret"}
    )

    assert response.status_code == 200
    assert response.json() == {"data": [], "meta": {}}
    assert_cross_origin_headers(response)
    assert len(route.calls) == 1
    request = route.calls.last.request
    assert str(request.url) == upstream_url
    assert request.headers["x-freepik-api-key"] == "secret"


@pytest.mark.asyncio
async def test_repeated_get_is_forwarded_each_time(client: AsyncClient, respx_mock: MockRouter):
    route = respx_mock.get(f"{UPSTREAM}/v1/icons/42").mock(
        return_value=Response(200, json={"data": {"id": 42}})
    )

    first = await client.get("/v1/icons/42")
    second = await client.get("/v1/icons/42")

    assert first.json() == second.json() == {"data": {"id": 42}}
    assert len(route.calls) == 2


@pytest.mark.asyncio
async def test_only_allow_listed_headers_reach_upstream(
    client: AsyncClient, respx_mock: MockRouter
):
    route = respx_mock.get(f"{UPSTREAM}/v1/icons").mock(return_value=Response(200, json={}))

    await client.get(
        "/v1/icons",
        headers={
            "x-freepik-api-key": "secret",
            "Cookie": "session=abc",
            "X-Custom": "leak",
            "Authorization": "Bearer other",
            "X-Correlation-ID": "9f1b0f3e-3d51-4a8e-9a8b-0c6f5c2b7d11",
        },
    )

    sent = route.calls.last.request.headers
    assert sent["x-freepik-api-key"] == "secret"
    assert "cookie" not in sent
    assert "x-custom" not in sent
    assert "authorization" not in sent
    assert "x-correlation-id" not in sent
    assert sent["host"] == "api.freepik.com"


@pytest.mark.asyncio
async def test_get_body_is_never_forwarded(client: AsyncClient, respx_mock: MockRouter):
    route = respx_mock.get(f"{UPSTREAM}/v1/ai/text-to-icon/t-1").mock(
        return_value=Response(200, json={"status": "pending"})
    )

    await client.request("GET", "/v1/ai/text-to-icon/t-1", content=b"should not be sent")

    assert route.calls.last.request.content == b""


@pytest.mark.asyncio
async def test_post_body_and_content_type_are_forwarded(
    client: AsyncClient, respx_mock: MockRouter
):
    route = respx_mock.post(f"{UPSTREAM}/v1/ai/text-to-icon").mock(
        return_value=Response(200, json={"task_id": "t-1"})
    )

    response = await client.post(
        "/v1/ai/text-to-icon",
        json={"prompt": "sun icon"},
        headers={"x-freepik-api-key": "secret"},
    )

    assert response.status_code == 200
    assert response.json() == {"task_id": "t-1"}
    request = route.calls.last.request
    assert request.content == b'{"prompt":"sun icon"}'
    assert request.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_upstream_status_and_body_pass_through(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.get(f"{UPSTREAM}/v1/icons").mock(
        return_value=Response(429, text="Too Many Requests")
    )

    response = await client.get("/v1/icons?term=x")

    assert response.status_code == 429
    assert response.text == "Too Many Requests"
    assert_cross_origin_headers(response)


@pytest.mark.asyncio
async def test_cross_origin_headers_override_upstream_values(
    client: AsyncClient, respx_mock: MockRouter
):
    respx_mock.get(f"{UPSTREAM}/v1/icons").mock(
        return_value=Response(
            200,
            json={},
            headers={
                "Access-Control-Allow-Origin": "https://www.freepik.com",
                "Access-Control-Max-Age": "5",
                "X-RateLimit-Remaining": "24",
            },
        )
    )

    response = await client.get("/v1/icons")

    assert_cross_origin_headers(response)
    assert response.headers["x-ratelimit-remaining"] == "24"


@pytest.mark.asyncio
async def test_repeated_upstream_headers_are_preserved(
    client: AsyncClient, respx_mock: MockRouter
):
    respx_mock.get(f"{UPSTREAM}/v1/icons").mock(
        return_value=Response(
            200,
            headers=[("Set-Cookie", "a=1; Path=/"), ("Set-Cookie", "b=2; Path=/")],
            json={"data": []},
        )
    )

    response = await client.get("/v1/icons?term=x")

    assert response.status_code == 200
    assert response.headers.get_list("set-cookie") == ["a=1; Path=/", "b=2; Path=/"]
    assert response.json() == {"data": []}
    assert_cross_origin_headers(response)


@pytest.mark.asyncio
async def test_unreachable_upstream_returns_gateway_failure(
    client: AsyncClient, respx_mock: MockRouter
):
    respx_mock.post(f"{UPSTREAM}/v1/ai/text-to-icon").mock(
        side_effect=httpx.ConnectError("Connection refused")
    )

    response = await client.post("/v1/ai/text-to-icon", json={"prompt": "sun icon"})

    assert response.status_code == 502
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": "Connection refused"}
    assert_cross_origin_headers(response)


@pytest.mark.asyncio
async def test_upstream_timeout_returns_gateway_failure(
    client: AsyncClient, respx_mock: MockRouter
):
    respx_mock.get(f"{UPSTREAM}/v1/icons").mock(side_effect=httpx.ReadTimeout("timed out"))

    response = await client.get("/v1/icons")

    assert response.status_code == 502
    assert response.json() == {"error": "timed out"}


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client: AsyncClient, respx_mock: MockRouter):
    respx_mock.get(f"{UPSTREAM}/v1/icons").mock(return_value=Response(200, json={}))
    correlation_id = "9f1b0f3e-3d51-4a8e-9a8b-0c6f5c2b7d11"

    response = await client.get("/v1/icons", headers={"X-Correlation-ID": correlation_id})

    assert response.headers["x-correlation-id"] == correlation_id
