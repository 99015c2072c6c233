"""Freepik API HTTP client.

Builds authenticated requests for stock icon search/download and AI icon
generation, and normalizes upstream failures into the Freepik error taxonomy.
Each operation issues exactly one request; only the generation poller loops.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import httpx
from freepik_common.icon_enums import DownloadFormat, GenerationFormat, PngSize
from freepik_common.models import (
    GeneratedIcon,
    GenerationPreviewRequest,
    GenerationRequest,
    GenerationTask,
    IconDetailResponse,
    IconSearchResponse,
    SearchQuery,
)
from freepik_service_libs.error_handling import (
    DownloadUnavailableError,
    InvalidCredentialError,
    InvalidParameterError,
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    UpstreamError,
)
from freepik_service_libs.logging_utils import create_service_logger
from pydantic import BaseModel, ValidationError

from freepik_client import endpoints
from freepik_client.config import FreepikClientSettings, settings
from freepik_client.poller import GenerationPoller
from freepik_client.protocols import FreepikClientProtocol
from freepik_client.result_policy import resolve_result_url

logger = create_service_logger("freepik_client.client")


def _validate(model: type[BaseModel], **fields: Any) -> Any:
    """Build a request model, mapping validation failures to InvalidParameterError."""
    try:
        return model(**fields)
    except ValidationError as e:
        first = e.errors()[0]
        parameter = ".".join(str(part) for part in first["loc"]) or model.__name__
        raise InvalidParameterError(
            parameter, first.get("input"), f"Invalid value for '{parameter}': {first['msg']}"
        ) from e


def _decode(model: type[BaseModel], payload: dict[str, Any], operation: str) -> Any:
    """Validate a response envelope, mapping failures to MalformedResponseError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected API response shape for {operation}.",
            operation=operation,
            errors=e.error_count(),
        ) from e


def create_http_client(config: FreepikClientSettings = settings) -> httpx.AsyncClient:
    """Create an httpx AsyncClient with the configured timeouts."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            config.HTTP_CLIENT_TIMEOUT_SECONDS,
            connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
        )
    )


class FreepikClient(FreepikClientProtocol):
    """HTTP client for the Freepik icons and text-to-icon API."""

    def __init__(
        self,
        api_key: str | None,
        http_client: httpx.AsyncClient,
        config: FreepikClientSettings = settings,
    ) -> None:
        """Initialize with a credential and a shared HTTP client.

        Args:
            api_key: Opaque API key. Empty keys are still sent; the upstream
                401 is the authoritative signal.
            http_client: Shared httpx AsyncClient instance
            config: Client settings (base URL, header name, polling defaults)
        """
        self._api_key = api_key or ""
        self._client = http_client
        self._config = config
        self._base_url = config.BASE_URL.rstrip("/")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Mapping[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one authenticated request and decode the JSON object response.

        Raises:
            InvalidCredentialError, RateLimitedError, NotFoundError, UpstreamError:
                On non-success statuses
            MalformedResponseError: The success body is not a JSON object
            httpx.HTTPError: On transport failures, propagated unchanged
        """
        url = f"{self._base_url}{path}"
        headers = {self._config.API_KEY_HEADER: self._api_key}

        logger.debug(
            f"Sending {method} {path}",
            extra={"operation": operation, "has_body": json_body is not None},
        )

        response = await self._client.request(
            method, url, params=params, json=json_body, headers=headers
        )

        if not response.is_success:
            self._raise_for_status(response, operation)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "Unexpected API response: body is not valid JSON.",
                operation=operation,
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                "Unexpected API response: expected a JSON object.",
                operation=operation,
                payload_type=type(payload).__name__,
            )
        return payload

    def _raise_for_status(self, response: httpx.Response, operation: str) -> None:
        """Map a non-success response onto the error taxonomy. Always raises."""
        status_code = response.status_code
        logger.warning(
            f"Upstream returned {status_code} for {operation}",
            extra={"operation": operation, "status_code": status_code},
        )

        if status_code == 401:
            raise InvalidCredentialError()
        if status_code == 429:
            raise RateLimitedError(self._config.RATE_LIMIT_GUIDANCE)
        if status_code == 404:
            raise NotFoundError(operation=operation, url=str(response.request.url.path))
        raise UpstreamError(status_code, response.text, response.reason_phrase)

    # ------------------------------------------------------------------
    # Stock icons
    # ------------------------------------------------------------------

    async def search_icons(
        self,
        term: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        family_id: str | int | None = None,
        order: str | None = None,
        thumbnail_size: int | None = None,
        slug: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> IconSearchResponse:
        """Search icons from the stock library.

        Args:
            term: Search query, required and non-empty
            page: 1-based page number
            per_page: Page size; the configured default is sent when omitted
            family_id: Restrict to one icon family
            order: "relevance" or "recent"
            thumbnail_size: Requested thumbnail size
            slug: Restrict by slug
            filters: Extra filters, sent as ``filters[<key>]=<value>``

        Returns:
            Search envelope with icon data and pagination metadata
        """
        query: SearchQuery = _validate(
            SearchQuery,
            term=term,
            page=page,
            per_page=per_page if per_page is not None else self._config.DEFAULT_PER_PAGE,
            family_id=family_id,
            order=order,
            thumbnail_size=thumbnail_size,
            slug=slug,
            filters=dict(filters or {}),
        )
        payload = await self._request(
            "GET", endpoints.ICONS_SEARCH, operation="search_icons", params=query.to_params()
        )
        return _decode(IconSearchResponse, payload, "search_icons")

    async def get_icon_by_id(self, icon_id: int | str) -> IconDetailResponse:
        """Get icon details (thumbnails, tags, family) by id."""
        payload = await self._request(
            "GET", endpoints.icon_by_id(icon_id), operation="get_icon_by_id"
        )
        return _decode(IconDetailResponse, payload, "get_icon_by_id")

    async def download_icon(
        self, icon_id: int | str, format: str, png_size: int | None = None
    ) -> str:
        """Download an icon in the specified format.

        Args:
            icon_id: Icon identifier
            format: One of svg, png, gif, mp4, aep, json, psd, eps
            png_size: Pixel size; required for png and ignored otherwise

        Returns:
            Short-lived asset URL

        Raises:
            InvalidParameterError: Format or size outside the enumerated sets
            DownloadUnavailableError: The envelope carried no URL
        """
        try:
            download_format = DownloadFormat(format)
        except ValueError as e:
            raise InvalidParameterError("format", format) from e

        params = {"format": download_format.value}
        if download_format is DownloadFormat.PNG:
            if png_size is None:
                raise InvalidParameterError(
                    "png_size", png_size, "png_size is required when format is 'png'"
                )
            try:
                params["png_size"] = str(PngSize(int(png_size)).value)
            except (TypeError, ValueError) as e:
                raise InvalidParameterError("png_size", png_size) from e

        payload = await self._request(
            "GET", endpoints.icon_download(icon_id), operation="download_icon", params=params
        )

        data = payload.get("data")
        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise DownloadUnavailableError(icon_id)
        return str(url)

    # ------------------------------------------------------------------
    # AI icon generation
    # ------------------------------------------------------------------

    async def generate_icon(
        self,
        prompt: str,
        *,
        style: str | None = None,
        format: str | None = None,
        num_inference_steps: Any = None,
        guidance_scale: Any = None,
    ) -> GenerationTask:
        """Generate an icon from a text prompt.

        Only the options supplied by the caller are sent.

        Returns:
            Generation task descriptor (includes the task id)
        """
        request: GenerationRequest = _validate(
            GenerationRequest,
            prompt=prompt,
            style=style,
            format=format,
            num_inference_steps=num_inference_steps,
            guidance_scale=guidance_scale,
        )
        payload = await self._request(
            "POST", endpoints.AI_GENERATE, operation="generate_icon", json_body=request.to_body()
        )
        return GenerationTask.from_payload(payload)

    async def generate_preview(
        self, prompt: str, *, style: str | None = None, format: str | None = None
    ) -> GenerationTask:
        """Generate a preview icon from a text prompt (faster, lower quality)."""
        request: GenerationPreviewRequest = _validate(
            GenerationPreviewRequest, prompt=prompt, style=style, format=format
        )
        payload = await self._request(
            "POST", endpoints.AI_PREVIEW, operation="generate_preview", json_body=request.to_body()
        )
        return GenerationTask.from_payload(payload)

    async def get_generation_status(self, task_id: str) -> GenerationTask:
        payload = await self._request(
            "GET", endpoints.ai_status(task_id), operation="get_generation_status"
        )
        task = GenerationTask.from_payload(payload)
        if task.task_id is None:
            task.task_id = task_id
        return task

    async def download_generated_icon(self, task_id: str, format: str) -> dict[str, Any]:
        """Render a previously generated icon.

        Args:
            task_id: Generation task id
            format: png or svg

        Returns:
            Download descriptor as returned by the API
        """
        try:
            render_format = GenerationFormat(format)
        except ValueError as e:
            raise InvalidParameterError("format", format) from e

        return await self._request(
            "POST",
            endpoints.ai_render(task_id, render_format.value),
            operation="download_generated_icon",
        )

    async def poll_generation_status(
        self,
        task_id: str,
        *,
        interval_seconds: float | None = None,
        max_attempts: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> GenerationTask:
        """Poll a generation task until it completes, fails or times out."""
        poller = GenerationPoller(
            self.get_generation_status,
            interval_seconds=(
                interval_seconds
                if interval_seconds is not None
                else self._config.POLL_INTERVAL_SECONDS
            ),
            max_attempts=max_attempts if max_attempts is not None else self._config.POLL_MAX_ATTEMPTS,
        )
        return await poller.wait_for_completion(task_id, cancel_event=cancel_event)

    async def generate_and_wait(
        self,
        prompt: str,
        *,
        style: str | None = None,
        format: str | None = None,
        num_inference_steps: Any = None,
        guidance_scale: Any = None,
        cancel_event: asyncio.Event | None = None,
    ) -> GeneratedIcon:
        """Start a generation, wait for completion and resolve the result URL.

        Raises:
            MalformedResponseError: The generation response carried no task id
            GenerationFailedError, GenerationTimeoutError, GenerationCancelledError:
                From the poller
            EmptyGenerationResultError: Completed without any result URL
        """
        started = await self.generate_icon(
            prompt,
            style=style,
            format=format,
            num_inference_steps=num_inference_steps,
            guidance_scale=guidance_scale,
        )
        if not started.task_id:
            raise MalformedResponseError(
                "Unexpected API response: no task ID returned.", operation="generate_icon"
            )

        logger.info("Generation task started", extra={"task_id": started.task_id})

        completed = await self.poll_generation_status(started.task_id, cancel_event=cancel_event)
        url = resolve_result_url(completed)
        return GeneratedIcon(task_id=started.task_id, url=url, task=completed)
