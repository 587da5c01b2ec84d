"""Application orchestration entry points."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from fedinotify.adapters.mastodon import parse_grouped_notifications
from fedinotify.domain.capabilities import filter_supported
from fedinotify.domain.merge import merge_grouped_results
from fedinotify.domain.model import GroupedNotificationResults

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from fedinotify.domain.capabilities import FlavourInput


log = getLogger(__name__)


def load_pages(paths: Iterable[Path]) -> list[tuple[str, Mapping[str, object]]]:
    """Read JSON documents from ``paths`` and label each with its file name."""

    pages: list[tuple[str, Mapping[str, object]]] = []
    for path in paths:
        with path.open(encoding="utf-8") as handle:
            pages.append((str(path), json.load(handle)))
    return pages


def fold_notification_pages(
    pages: Iterable[tuple[str, Mapping[str, object]]],
    *,
    accumulated: GroupedNotificationResults | None = None,
    flavour: FlavourInput | None = None,
) -> GroupedNotificationResults:
    """Decode and merge pages in delivery order.

    Each page is decoded completely before it is merged, so a page that fails to
    decode raises ``GroupedNotificationsDecodeError`` and leaves ``accumulated`` as it
    was after the previous page. With ``flavour`` set, groups of kinds that flavour
    does not support are dropped from the result.
    """

    state = accumulated if accumulated is not None else GroupedNotificationResults()
    for source, document in pages:
        page = parse_grouped_notifications(document, source=source)
        merge_grouped_results(state, page)
        log.info(
            "Folded %s: groups=%s, total=%s", source, len(page.notification_groups), len(state)
        )

    if flavour is not None:
        supported = filter_supported(state.notification_groups, flavour)
        log.debug("Dropped %s unsupported groups", len(state) - len(supported))
        state.notification_groups = supported

    return state
