"""
JSON file implementation of IconStateStoreProtocol.

Favorites, history and preferences live under one JSON document keyed by
``freepik-icons-*`` names. Storage failures never reach the caller: writes
are logged and dropped, reads fall back to defaults.
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from freepik_common.icon_enums import DownloadFormat, IconStyle, PngSize
from freepik_service_libs.logging_utils import create_service_logger

from freepik_client.protocols import IconStateStoreProtocol

logger = create_service_logger("freepik_client.state_store")

MAX_HISTORY = 100

KEY_PREFIX = "freepik-icons-"
FAVORITES_KEY = f"{KEY_PREFIX}favorites"
HISTORY_KEY = f"{KEY_PREFIX}history"
API_KEY_KEY = f"{KEY_PREFIX}api-key"
DEFAULT_FORMAT_KEY = f"{KEY_PREFIX}default-format"
DEFAULT_SIZE_KEY = f"{KEY_PREFIX}default-size"
DEFAULT_AI_STYLE_KEY = f"{KEY_PREFIX}default-ai-style"

DEFAULT_FORMAT = DownloadFormat.PNG.value
DEFAULT_SIZE = PngSize.PX_128.value
DEFAULT_AI_STYLE = IconStyle.SOLID.value

# Icon fields persisted for favorites and history entries
_SAVED_ICON_FIELDS = ("id", "name", "slug", "thumbnails", "style", "family", "tags")


def _saved_icon(icon: Mapping[str, Any]) -> dict[str, Any]:
    return {field: icon.get(field) for field in _SAVED_ICON_FIELDS}


class JsonFileStateStore(IconStateStoreProtocol):
    """Persist favorites, history and user preferences in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    # --- Raw document access ---

    def _load(self) -> dict[str, Any]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning(f"State file read failed: {e}", extra={"path": str(self._path)})
            return {}
        try:
            document = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as e:
            logger.warning(f"State file is not valid JSON: {e}", extra={"path": str(self._path)})
            return {}
        return document if isinstance(document, dict) else {}

    def _get(self, key: str, fallback: Any) -> Any:
        value = self._load().get(key)
        return fallback if value is None or value == "" else value

    def _set(self, key: str, value: Any, operation: str) -> None:
        document = self._load()
        document[key] = value
        self._write(document, operation)

    def _remove(self, key: str, operation: str) -> None:
        document = self._load()
        if document.pop(key, None) is not None:
            self._write(document, operation)

    def _write(self, document: dict[str, Any], operation: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(document), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"{operation} failed: {e}", extra={"path": str(self._path)})

    def _get_list(self, key: str) -> list[dict[str, Any]]:
        value = self._get(key, [])
        return [entry for entry in value if isinstance(entry, dict)] if isinstance(value, list) else []

    # --- Favorites ---

    def add_favorite(self, icon: Mapping[str, Any]) -> None:
        favorites = self.get_favorites()
        if any(favorite.get("id") == icon.get("id") for favorite in favorites):
            return
        favorites.append(_saved_icon(icon))
        self._set(FAVORITES_KEY, favorites, "add_favorite")

    def remove_favorite(self, icon_id: int | str) -> None:
        favorites = [f for f in self.get_favorites() if f.get("id") != icon_id]
        self._set(FAVORITES_KEY, favorites, "remove_favorite")

    def get_favorites(self) -> list[dict[str, Any]]:
        return self._get_list(FAVORITES_KEY)

    def is_favorite(self, icon_id: int | str) -> bool:
        return any(favorite.get("id") == icon_id for favorite in self.get_favorites())

    def clear_favorites(self) -> None:
        self._remove(FAVORITES_KEY, "clear_favorites")

    # --- History ---

    def add_to_history(self, icon: Mapping[str, Any]) -> None:
        """Record a use of the icon, most recent first.

        An existing entry for the same id is replaced; the oldest entries are
        evicted beyond MAX_HISTORY.
        """
        entry = _saved_icon(icon)
        entry["timestamp"] = int(time.time() * 1000)
        history = [h for h in self.get_history() if h.get("id") != icon.get("id")]
        history.insert(0, entry)
        self._set(HISTORY_KEY, history[:MAX_HISTORY], "add_to_history")

    def get_history(self) -> list[dict[str, Any]]:
        return self._get_list(HISTORY_KEY)

    def clear_history(self) -> None:
        self._remove(HISTORY_KEY, "clear_history")

    # --- Preferences ---

    def save_api_key(self, api_key: str) -> None:
        self._set(API_KEY_KEY, api_key, "save_api_key")

    def get_api_key(self) -> str:
        return str(self._get(API_KEY_KEY, ""))

    def save_default_format(self, format: str) -> None:
        self._set(DEFAULT_FORMAT_KEY, format, "save_default_format")

    def get_default_format(self) -> str:
        return str(self._get(DEFAULT_FORMAT_KEY, DEFAULT_FORMAT))

    def save_default_size(self, size: int) -> None:
        self._set(DEFAULT_SIZE_KEY, str(size), "save_default_size")

    def get_default_size(self) -> int:
        value = self._get(DEFAULT_SIZE_KEY, DEFAULT_SIZE)
        try:
            return int(value)
        except (TypeError, ValueError):
            return DEFAULT_SIZE

    def save_default_ai_style(self, style: str) -> None:
        self._set(DEFAULT_AI_STYLE_KEY, style, "save_default_ai_style")

    def get_default_ai_style(self) -> str:
        return str(self._get(DEFAULT_AI_STYLE_KEY, DEFAULT_AI_STYLE))
