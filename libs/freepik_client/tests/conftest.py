"""Shared fixtures for Freepik client tests."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from freepik_client.client import FreepikClient
from freepik_client.config import FreepikClientSettings

BASE_URL = "https://api.freepik.com/v1"
API_KEY = "test-api-key"


@pytest.fixture
def client_settings() -> FreepikClientSettings:
    """Settings with no poll delay so generation tests run instantly."""
    return FreepikClientSettings(BASE_URL=BASE_URL, POLL_INTERVAL_SECONDS=0, POLL_MAX_ATTEMPTS=5)


@pytest.fixture
async def freepik_client(client_settings: FreepikClientSettings) -> AsyncIterator[FreepikClient]:
    """Create Freepik client with real httpx client for respx mocking."""
    async with httpx.AsyncClient() as http_client:
        yield FreepikClient(API_KEY, http_client, client_settings)
