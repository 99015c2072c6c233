"""Upstream endpoint paths, relative to the configured base URL."""

from __future__ import annotations

ICONS_SEARCH = "/icons"
AI_GENERATE = "/ai/text-to-icon"
AI_PREVIEW = "/ai/text-to-icon/preview"


def icon_by_id(icon_id: int | str) -> str:
    return f"/icons/{icon_id}"


def icon_download(icon_id: int | str) -> str:
    return f"/icons/{icon_id}/download"


def ai_status(task_id: str) -> str:
    return f"/ai/text-to-icon/status/{task_id}"


def ai_render(task_id: str, format: str) -> str:
    return f"/ai/text-to-icon/{task_id}/render/{format}"
