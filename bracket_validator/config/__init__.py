"""Configuration module for bracket-validator.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from bracket_validator.config import get_settings

    settings = get_settings()

    prompt = settings.repl.prompt
    log_level = settings.logging.log_level
"""

from bracket_validator.config.settings import (
    DEFAULT_PROMPT,
    LoggingSettings,
    ReplSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "DEFAULT_PROMPT",
    "LoggingSettings",
    "ReplSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
