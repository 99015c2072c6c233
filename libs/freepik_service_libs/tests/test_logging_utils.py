"""Tests for logging_utils processors and configuration."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import pytest
import structlog

from freepik_service_libs.logging_utils import (
    _build_processors,
    add_service_context,
    configure_service_logging,
    create_service_logger,
)


class TestAddServiceContext:
    """Tests for the add_service_context processor."""

    def test_adds_service_name_and_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "freepik-icons-proxy")
        monkeypatch.setenv("ENVIRONMENT", "production")
        event_dict: dict[str, Any] = {"event": "request proxied"}

        result = add_service_context(None, "info", event_dict)

        assert result["service.name"] == "freepik-icons-proxy"
        assert result["deployment.environment"] == "production"

    def test_preserves_existing_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "freepik-icons-proxy")
        event_dict: dict[str, Any] = {"event": "test", "correlation_id": "abc-123"}

        result = add_service_context(None, "info", event_dict)

        assert result["event"] == "test"
        assert result["correlation_id"] == "abc-123"

    def test_defaults_when_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        result = add_service_context(None, "info", {})

        assert result["service.name"] == "unknown"
        assert result["deployment.environment"] == "development"


class TestBuildProcessors:
    def test_json_chain_ends_with_json_renderer(self) -> None:
        processors = _build_processors(use_json=True)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_chain_ends_with_console_renderer(self) -> None:
        processors = _build_processors(use_json=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_contextvars_merged_first(self) -> None:
        processors = _build_processors(use_json=True)

        assert processors[0] is structlog.contextvars.merge_contextvars
        assert add_service_context in processors


class TestConfigureServiceLogging:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        yield
        structlog.reset_defaults()
        logging.basicConfig(handlers=[logging.StreamHandler()], force=True)

    def test_sets_service_name_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("LOG_TO_FILE", raising=False)

        configure_service_logging("freepik-icons-proxy", environment="testing")

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.INFO

    def test_log_level_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_TO_FILE", raising=False)

        configure_service_logging("svc", environment="testing", log_level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler_added_when_enabled(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "relay.log"

        configure_service_logging(
            "relay", environment="testing", log_to_file=True, log_file_path=str(log_file)
        )

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)
        assert log_file.parent.exists()


def test_create_service_logger_binds_name() -> None:
    logger = create_service_logger("relay.proxy_routes")

    assert logger is not None
    assert hasattr(logger, "info")
