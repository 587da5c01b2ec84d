"""Fold freshly fetched pages of grouped notifications into accumulated state.

An incoming group fully replaces any accumulated group sharing its ``group_key``;
fields are never merged. After each fold the groups are ordered newest first by
``latest_page_notification_at`` (ISO-8601 strings compare chronologically), with
groups lacking a timestamp last. Accounts and statuses are replaced by the
incoming page's reference data.

The accumulated collection has a single owner; nothing here synchronises access.
"""

from __future__ import annotations

from logging import getLogger
from operator import attrgetter
from typing import TYPE_CHECKING

from fedinotify.domain.model import GroupedNotificationResults

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fedinotify.domain.model import NotificationGroup


log = getLogger(__name__)


def merge_grouped_results(
    accumulated: GroupedNotificationResults,
    incoming: GroupedNotificationResults,
) -> GroupedNotificationResults:
    """Merge ``incoming`` into ``accumulated`` in place and return it."""

    # A key repeated within one page keeps its last copy.
    latest: dict[str, NotificationGroup] = {
        group.group_key: group for group in incoming.notification_groups
    }
    kept = [group for group in accumulated.notification_groups if group.group_key not in latest]
    replaced = len(accumulated.notification_groups) - len(kept)

    kept.extend(latest.values())
    # list.sort is stable, so equal timestamps keep their relative order.
    kept.sort(key=attrgetter("sort_key"), reverse=True)

    accumulated.notification_groups = kept
    accumulated.accounts = list(incoming.accounts)
    accumulated.statuses = list(incoming.statuses)

    log.debug(
        "Merged notification page: incoming=%s, replaced=%s, total=%s",
        len(incoming.notification_groups),
        replaced,
        len(kept),
    )
    return accumulated


def merge_pages(pages: Iterable[GroupedNotificationResults]) -> GroupedNotificationResults:
    """Fold ``pages`` in order, starting from an empty collection."""

    accumulated = GroupedNotificationResults()
    for page in pages:
        merge_grouped_results(accumulated, page)
    return accumulated


__all__ = ["merge_grouped_results", "merge_pages"]
