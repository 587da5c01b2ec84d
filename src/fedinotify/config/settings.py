"""Client-side settings resolved from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fedinotify.domain.model import Flavour, OpenValue

from .env import optional_env_var
from .errors import ConfigurationError

FLAVOUR_ENV_VAR = "FEDINOTIFY_FLAVOUR"
LOG_LEVEL_ENV_VAR = "FEDINOTIFY_LOG_LEVEL"
DEFAULT_FLAVOUR = Flavour.MASTODON


@dataclass(frozen=True)
class ClientSettings:
    """Holds the server flavour the client talks to and its logging level."""

    flavour: OpenValue[Flavour]
    log_level: int = logging.INFO


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level: {value}")
    return level


def get_client_settings(*, flavour: str | None = None) -> ClientSettings:
    """Build settings from explicit overrides and ``FEDINOTIFY_*`` variables.

    Unrecognised flavour names are kept as ``Unknown`` values rather than rejected;
    capability lookups treat them as newer, Mastodon-compatible servers.
    """

    raw_flavour = flavour or optional_env_var(FLAVOUR_ENV_VAR, DEFAULT_FLAVOUR.value)
    raw_level = optional_env_var(LOG_LEVEL_ENV_VAR, "INFO")
    return ClientSettings(
        flavour=OpenValue.decode(Flavour, (raw_flavour or DEFAULT_FLAVOUR).strip().lower()),
        log_level=_parse_log_level(raw_level or "INFO"),
    )
