"""Configuration utilities for Freepik Icons services."""

from .service_base import ServiceSettings

__all__ = ["ServiceSettings"]
