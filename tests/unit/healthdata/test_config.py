"""
Tests for configuration management in `healthdata/config.py` and logging setup.

Covers:
- Environment parsing and debug defaults
- Logging level coercion and format selection
- Registry and report settings from the environment
- get_config cache behavior
- AppConfig validation (debug only allowed in development)
- configure_logging renderer selection
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from healthdata.config import (
    AppConfig,
    LoggingConfig,
    ReportConfig,
    get_config,
    load_config_from_env,
    reset_config_cache,
)
from healthdata.log import configure_logging

ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "REGISTRY_LOG_OVERWRITES",
    "REPORT_EXPORT_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start each test from an unset environment and an empty config cache."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


def test_load_config_dev_defaults() -> None:
    config = load_config_from_env()

    assert config.environment == "development"
    assert config.debug is True
    assert config.logging.format == "console"
    assert config.logging.level == "INFO"
    assert config.registry.log_overwrites is True
    assert config.reports.default_export_format == "pdf"


def test_production_uses_json_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")

    config = load_config_from_env()

    assert config.environment == "production"
    assert config.debug is False
    assert config.logging.format == "json"


def test_staging_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "stage")
    assert load_config_from_env().environment == "staging"


def test_explicit_log_format_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("LOG_FORMAT", "json")
    assert load_config_from_env().logging.format == "json"

    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_FORMAT", "console")
    assert load_config_from_env().logging.format == "console"


@pytest.mark.parametrize(
    "raw,expected",
    [("debug", "DEBUG"), (" warning ", "WARNING"), ("ERROR", "ERROR"), ("verbose", "INFO")],
)
def test_log_level_coercion(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert load_config_from_env().logging.level == expected


@pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("yes", True), ("1", True)])
def test_registry_overwrite_logging_flag(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("REGISTRY_LOG_OVERWRITES", raw)
    assert load_config_from_env().registry.log_overwrites is expected


def test_report_export_format_is_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_EXPORT_FORMAT", " .CSV ")
    assert load_config_from_env().reports.default_export_format == "csv"


def test_empty_export_format_rejected() -> None:
    with pytest.raises(ValueError):
        ReportConfig(default_export_format=" . ")


def test_report_placeholders_default() -> None:
    reports = load_config_from_env().reports
    assert reports.placeholder_report_id == "R001"
    assert reports.placeholder_date_range == "2025-01-01 ~ 2025-01-31"
    assert reports.placeholder_summary == "Initial Summary"


def test_get_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_config()
    monkeypatch.setenv("ENVIRONMENT", "production")
    assert get_config() is first

    reset_config_cache()
    assert get_config() is not first
    assert get_config().environment == "production"


def test_debug_only_allowed_in_development() -> None:
    AppConfig(environment="development", debug=True)
    with pytest.raises(ValueError, match="debug mode"):
        AppConfig(environment="production", debug=True)


class TestConfigureLogging:
    """configure_logging is checked through its calls so global logging state stays untouched."""

    @pytest.fixture
    def calls(self, monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
        recorded: dict[str, Any] = {}
        monkeypatch.setattr(structlog, "configure", lambda **kw: recorded.update(structlog=kw))
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: recorded.update(stdlib=kw))
        return recorded

    def test_json_renderer(self, calls: dict[str, Any]) -> None:
        configure_logging(LoggingConfig(level="WARNING", format="json"))

        assert calls["stdlib"]["level"] == logging.WARNING
        processors = calls["structlog"]["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.stdlib.filter_by_level in processors

    def test_console_renderer(self, calls: dict[str, Any]) -> None:
        configure_logging(LoggingConfig(level="DEBUG", format="console"))

        assert calls["stdlib"]["level"] == logging.DEBUG
        assert isinstance(calls["structlog"]["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_defaults(self, calls: dict[str, Any]) -> None:
        configure_logging()

        assert calls["stdlib"]["level"] == logging.INFO
        assert isinstance(calls["structlog"]["processors"][-1], structlog.processors.JSONRenderer)
