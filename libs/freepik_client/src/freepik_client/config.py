"""
Configuration for the Freepik API client.

Point BASE_URL at the relay (e.g. https://relay.example.workers.dev/v1) when the
caller cannot reach api.freepik.com directly because of cross-origin rules.
"""

from __future__ import annotations

from freepik_common.models import DEFAULT_PER_PAGE
from freepik_service_libs.config import ServiceSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict


class FreepikClientSettings(ServiceSettings):
    """Configuration settings for FreepikClient."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FREEPIK_",
        case_sensitive=False,
        extra="ignore",
    )

    BASE_URL: str = Field(
        default="https://api.freepik.com/v1",
        description="Upstream API base URL, or the relay URL plus /v1",
    )
    API_KEY_HEADER: str = Field(
        default="x-freepik-api-key", description="Header carrying the API key"
    )
    DEFAULT_PER_PAGE: int = Field(default=DEFAULT_PER_PAGE, gt=0)

    # Generation polling
    POLL_INTERVAL_SECONDS: float = Field(default=2.0, ge=0)
    POLL_MAX_ATTEMPTS: int = Field(default=30, gt=0)

    # HTTP client timeouts
    HTTP_CLIENT_TIMEOUT_SECONDS: float = 30.0
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = 10.0

    RATE_LIMIT_GUIDANCE: str = Field(
        default="Free accounts allow 25 requests per day.",
        description="Quota guidance attached to rate limit errors",
    )


# Global settings instance
settings = FreepikClientSettings()
