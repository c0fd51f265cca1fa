"""Pytest configuration and shared fixtures."""

import logging

import pytest
from click.testing import CliRunner

from modflow.cli import cli


@pytest.fixture(autouse=True)
def clean_modflow_env(monkeypatch):
    """Remove MODFLOW_* settings so tests see the defaults.

    Settings are read fresh from the environment on every call, so a
    developer's shell configuration would otherwise leak into the tests.
    """
    for name in (
        "MODFLOW_LOG_FILE",
        "MODFLOW_LOG_LEVEL",
        "MODFLOW_LANGUAGE",
        "MODFLOW_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    # The CLI installs handlers on the package logger; drop them between tests
    logger = logging.getLogger("modflow")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["list-mods"])
        result = invoke(["serve"], input_data='{"id": 1, "method": "list_mods"}\\n')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke
