"""
Protocols for the Freepik API client and its collaborators.

The state store and document inserter are owned by the host application;
the client only depends on these narrow call/return contracts.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from freepik_common.models import (
    GeneratedIcon,
    GenerationTask,
    IconDetailResponse,
    IconSearchResponse,
)


@runtime_checkable
class FreepikClientProtocol(Protocol):
    """Protocol for the icon API client."""

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
        """Search stock icons."""
        ...

    async def get_icon_by_id(self, icon_id: int | str) -> IconDetailResponse:
        """Fetch full metadata for one icon."""
        ...

    async def download_icon(
        self, icon_id: int | str, format: str, png_size: int | None = None
    ) -> str:
        """Return a short-lived download URL for an icon."""
        ...

    async def generate_icon(
        self,
        prompt: str,
        *,
        style: str | None = None,
        format: str | None = None,
        num_inference_steps: Any = None,
        guidance_scale: Any = None,
    ) -> GenerationTask:
        """Start an AI icon generation task."""
        ...

    async def generate_preview(
        self, prompt: str, *, style: str | None = None, format: str | None = None
    ) -> GenerationTask:
        """Start a faster, lower quality preview generation task."""
        ...

    async def get_generation_status(self, task_id: str) -> GenerationTask:
        """Fetch a generation task's current status once."""
        ...

    async def download_generated_icon(self, task_id: str, format: str) -> dict[str, Any]:
        """Render a generated icon and return the download descriptor."""
        ...

    async def poll_generation_status(
        self,
        task_id: str,
        *,
        interval_seconds: float | None = None,
        max_attempts: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> GenerationTask:
        """Wait for a generation task to complete."""
        ...

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
        """Generate an icon, wait for it, and resolve its result URL."""
        ...


@runtime_checkable
class IconStateStoreProtocol(Protocol):
    """Protocol for local user state: favorites, history and preferences.

    Implementations swallow their own failures; reads fall back to defaults.
    """

    def add_favorite(self, icon: Mapping[str, Any]) -> None: ...

    def remove_favorite(self, icon_id: int | str) -> None: ...

    def get_favorites(self) -> list[dict[str, Any]]: ...

    def is_favorite(self, icon_id: int | str) -> bool: ...

    def clear_favorites(self) -> None: ...

    def add_to_history(self, icon: Mapping[str, Any]) -> None: ...

    def get_history(self) -> list[dict[str, Any]]: ...

    def clear_history(self) -> None: ...

    def save_api_key(self, api_key: str) -> None: ...

    def get_api_key(self) -> str: ...

    def save_default_format(self, format: str) -> None: ...

    def get_default_format(self) -> str: ...

    def save_default_size(self, size: int) -> None: ...

    def get_default_size(self) -> int: ...

    def save_default_ai_style(self, style: str) -> None: ...

    def get_default_ai_style(self) -> str: ...


@runtime_checkable
class DocumentInserterProtocol(Protocol):
    """Protocol for inserting a resolved asset into the active document."""

    async def insert_image_from_url(self, url: str) -> None:
        """Fetch the image at url and insert it into the host document."""
        ...
