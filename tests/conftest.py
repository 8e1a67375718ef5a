"""Pytest configuration and shared fixtures."""

import pytest

from bracket_validator.config import reset_settings
from bracket_validator.utils.logging import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Route structlog through stdlib logging on stderr.

    Unconfigured structlog prints to stdout, which would mix log lines
    into the output the CLI tests compare against.
    """
    setup_logging()


@pytest.fixture(autouse=True)
def reset_config_settings(monkeypatch, tmp_path):
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time. Tests run from an empty
    directory so a developer's .env file is never picked up.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("REPL_PROMPT", "REPL_VERBOSE", "LOG_LEVEL", "DEBUG_ALL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
