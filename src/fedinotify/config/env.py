"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def optional_env_var(name: str, default: str | None = None) -> str | None:
    """Return a stripped environment variable, falling back to ``default`` when blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
