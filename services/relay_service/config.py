"""
Configuration for the Freepik Icons relay.

The relay forwards browser calls to the upstream API and stamps a fixed set of
cross-origin headers on every response it produces.
"""

from __future__ import annotations

from freepik_service_libs.config import ServiceSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict


class Settings(ServiceSettings):
    """Configuration settings for the relay service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RELAY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "freepik-icons-proxy"

    # HTTP server configuration
    HTTP_HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    HTTP_PORT: int = Field(default=8787, description="HTTP server port")

    # Upstream
    UPSTREAM_BASE_URL: str = Field(
        default="https://api.freepik.com", description="Origin requests are forwarded to"
    )

    # Cross-origin header set
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: list[str] = Field(default=["GET", "POST", "OPTIONS"])
    CORS_ALLOW_HEADERS: list[str] = Field(default=["Content-Type", "x-freepik-api-key"])
    CORS_MAX_AGE_SECONDS: int = 86400

    # HTTP Client Timeouts
    HTTP_CLIENT_TIMEOUT_SECONDS: float = 30.0
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
