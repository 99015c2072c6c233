"""Concrete implementations of the client collaborator protocols."""

from .json_state_store import MAX_HISTORY, JsonFileStateStore

__all__ = ["MAX_HISTORY", "JsonFileStateStore"]
