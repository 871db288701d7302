"""Tests for the flowsmith.logging module."""

from __future__ import annotations

import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from flowsmith.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


def root_renderer() -> object:
    [handler] = logging.getLogger().handlers
    formatter = handler.formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    return formatter.processors[-1]


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self) -> None:
        """Test default logging configuration (console output)."""
        configure_logging()

        assert structlog.is_configured()

    def test_configure_logging_json_via_env(self) -> None:
        """Test JSON logging when FLOWSMITH_LOG_FORMAT=json."""
        with patch.dict(os.environ, {"FLOWSMITH_LOG_FORMAT": "json"}):
            configure_logging()

        assert isinstance(root_renderer(), structlog.processors.JSONRenderer)

    def test_configure_logging_force_json(self) -> None:
        """Test forcing JSON output regardless of environment."""
        configure_logging(force_json=True)

        assert isinstance(root_renderer(), structlog.processors.JSONRenderer)

    def test_console_renderer_by_default(self) -> None:
        with patch.dict(os.environ, {"FLOWSMITH_LOG_FORMAT": ""}):
            configure_logging()

        assert isinstance(root_renderer(), structlog.dev.ConsoleRenderer)

    def test_configure_logging_custom_level(self) -> None:
        """Test setting custom log level."""
        configure_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_level_from_env(self) -> None:
        """Test FLOWSMITH_LOG_LEVEL sets the root level."""
        with patch.dict(os.environ, {"FLOWSMITH_LOG_LEVEL": "error"}):
            configure_logging()

        assert logging.getLogger().level == logging.ERROR

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test that repeated configuration keeps a single root handler."""
        configure_logging()
        configure_logging()

        assert len(logging.getLogger().handlers) == 1


class TestContext:
    """Tests for context binding helpers."""

    def test_bind_and_clear_context(self) -> None:
        bind_context(workflow="OrderProcess", application="Orders")
        assert structlog.contextvars.get_contextvars() == {
            "workflow": "OrderProcess",
            "application": "Orders",
        }

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_unbind_context_removes_only_given_keys(self) -> None:
        bind_context(workflow="OrderProcess", run="1")
        unbind_context("workflow")

        assert structlog.contextvars.get_contextvars() == {"run": "1"}
        clear_context()


def test_get_logger_returns_bound_logger() -> None:
    log = get_logger("flowsmith.tests")

    assert hasattr(log, "info")
    assert hasattr(log, "bind")


def test_event_rendered_once_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(force_json=True, level=logging.INFO)
    bind_context(workflow="OrderProcess")

    get_logger("flowsmith.tests").info("artifact_written", path="workflow.json")

    [line] = capsys.readouterr().err.splitlines()
    event = json.loads(line)
    assert event["event"] == "artifact_written"
    assert event["path"] == "workflow.json"
    assert event["workflow"] == "OrderProcess"
    assert event["level"] == "info"
    assert event["logger"] == "flowsmith.tests"


def test_level_filters_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(force_json=True, level=logging.WARNING)

    get_logger("flowsmith.tests").info("hidden")
    get_logger("flowsmith.tests").warning("shown")

    events = [json.loads(line)["event"] for line in capsys.readouterr().err.splitlines()]
    assert events == ["shown"]
