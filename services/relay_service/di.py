"""Dependency injection providers for the relay service."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from dishka import Provider, Scope, provide

from freepik_service_libs.logging_utils import create_service_logger
from services.relay_service.config import Settings, settings

logger = create_service_logger("relay.di")


class RelayProvider(Provider):
    """APP-scoped infrastructure: settings and the pooled upstream HTTP client."""

    scope = Scope.APP

    @provide
    def get_config(self) -> Settings:
        return settings

    @provide
    async def get_http_client(self, config: Settings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            logger.info("Upstream HTTP client opened", extra={"upstream": config.UPSTREAM_BASE_URL})
            yield client
        logger.info("Upstream HTTP client closed")
