"""Tests for settings resolution and logging setup."""

import logging
from pathlib import Path

import pytest

from modflow.config import configure_logging, resolve_settings


def test_defaults():
    settings = resolve_settings()

    assert settings.log_file is None
    assert settings.log_level == "WARNING"
    assert settings.default_language == "javascript"
    assert settings.request_timeout == 30.0


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MODFLOW_LOG_FILE", str(tmp_path / "modflow.log"))
    monkeypatch.setenv("MODFLOW_LOG_LEVEL", "debug")
    monkeypatch.setenv("MODFLOW_LANGUAGE", "typescriptreact")
    monkeypatch.setenv("MODFLOW_REQUEST_TIMEOUT", "2.5")

    settings = resolve_settings()

    assert settings.log_file == tmp_path / "modflow.log"
    assert settings.log_level == "DEBUG"
    assert settings.default_language == "typescriptreact"
    assert settings.request_timeout == 2.5


def test_arguments_beat_environment(monkeypatch):
    monkeypatch.setenv("MODFLOW_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("MODFLOW_LANGUAGE", "typescript")

    settings = resolve_settings(log_level="info", language="javascriptreact", request_timeout=1)

    assert settings.log_level == "INFO"
    assert settings.default_language == "javascriptreact"
    assert settings.request_timeout == 1


def test_unknown_language_is_javascript():
    assert resolve_settings(language="python").default_language == "javascript"


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("MODFLOW_REQUEST_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="MODFLOW_REQUEST_TIMEOUT"):
        resolve_settings()


def test_configure_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "modflow.log"
    handler = configure_logging(resolve_settings(log_file=str(log_file), log_level="INFO"))

    logging.getLogger("modflow.server").info("hello from the server")
    handler.flush()

    assert isinstance(handler, logging.FileHandler)
    assert "hello from the server" in Path(log_file).read_text()


def test_configure_logging_replaces_handlers():
    first = configure_logging(resolve_settings())
    second = configure_logging(resolve_settings())

    assert logging.getLogger("modflow").handlers == [second]
    assert first is not second
