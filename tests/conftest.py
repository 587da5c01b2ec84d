from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from fedinotify.config import FLAVOUR_ENV_VAR, LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def page_paths() -> tuple[Path, Path]:
    return (
        DATA_DIR / "grouped_notifications_page1.json",
        DATA_DIR / "grouped_notifications_page2.json",
    )


@pytest.fixture(scope="session")
def grouped_notification_payloads(
    page_paths: tuple[Path, Path],
) -> tuple[Mapping[str, object], Mapping[str, object]]:
    first, second = (json.loads(path.read_text(encoding="utf-8")) for path in page_paths)
    return first, second


@pytest.fixture(autouse=True)
def _clean_client_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(FLAVOUR_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
