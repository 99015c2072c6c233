"""Insert stock and AI-generated icons into the host document.

Ties the API client, the document inserter and the local state store
together. Stock icons are recorded in history only after a successful
insertion; a failed download or insertion leaves history untouched.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from freepik_common.icon_enums import DownloadFormat
from freepik_common.models import GeneratedIcon, IconSummary
from freepik_service_libs.logging_utils import create_service_logger

from freepik_client.protocols import (
    DocumentInserterProtocol,
    FreepikClientProtocol,
    IconStateStoreProtocol,
)

logger = create_service_logger("freepik_client.insertion")


class IconInsertionService:
    """Download or generate an icon and hand its URL to the document inserter."""

    def __init__(
        self,
        client: FreepikClientProtocol,
        inserter: DocumentInserterProtocol,
        store: IconStateStoreProtocol,
    ):
        self.client = client
        self.inserter = inserter
        self.store = store

    async def insert_stock_icon(
        self,
        icon: IconSummary | Mapping[str, Any],
        *,
        format: str | None = None,
        png_size: int | None = None,
    ) -> str:
        """Download a stock icon, insert it and record it in history.

        Args:
            icon: Icon from a search or detail response
            format: Download format; the stored default when omitted
            png_size: Pixel size for png; the stored default when omitted

        Returns:
            The URL that was inserted
        """
        entry = icon.model_dump() if isinstance(icon, IconSummary) else dict(icon)
        download_format = format or self.store.get_default_format()
        size = None
        if download_format == DownloadFormat.PNG.value:
            size = png_size if png_size is not None else self.store.get_default_size()

        url = await self.client.download_icon(entry["id"], download_format, size)
        await self.inserter.insert_image_from_url(url)
        self.store.add_to_history(entry)

        logger.info(
            "Icon inserted",
            extra={"icon_id": entry["id"], "format": download_format, "png_size": size},
        )
        return url

    async def insert_generated_icon(
        self,
        prompt: str,
        *,
        style: str | None = None,
        format: str | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> GeneratedIcon:
        """Generate an icon from a prompt, wait for it and insert the result.

        The stored default AI style is used when style is omitted.
        """
        generated = await self.client.generate_and_wait(
            prompt,
            style=style or self.store.get_default_ai_style(),
            format=format,
            cancel_event=cancel_event,
        )
        await self.inserter.insert_image_from_url(generated.url)

        logger.info("Generated icon inserted", extra={"task_id": generated.task_id})
        return generated
