"""Application configuration helpers."""

from __future__ import annotations

from fedinotify.common.logging import configure_logging

from .env import optional_env_var
from .errors import ConfigurationError
from .settings import (
    DEFAULT_FLAVOUR,
    FLAVOUR_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    ClientSettings,
    get_client_settings,
)

__all__ = [
    "DEFAULT_FLAVOUR",
    "FLAVOUR_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "ClientSettings",
    "ConfigurationError",
    "configure_logging",
    "get_client_settings",
    "optional_env_var",
]
