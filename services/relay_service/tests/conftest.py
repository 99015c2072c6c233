"""Shared fixtures for relay service tests."""

from __future__ import annotations

import pytest
from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from httpx import ASGITransport, AsyncClient

from services.relay_service.app import create_app
from services.relay_service.tests.test_provider import RelayTestProvider


@pytest.fixture
async def container():
    """Create test container with the relay test provider."""
    container = make_async_container(RelayTestProvider(), FastapiProvider())
    yield container
    await container.close()


@pytest.fixture
async def client(container):
    """Create test client bound to the test container."""
    app = create_app()

    # Replace the production container
    setup_dishka(container, app)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
