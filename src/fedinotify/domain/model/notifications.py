"""Grouped notification entities.

Accounts, statuses and reports are owned by other parts of a client; here they are
carried as opaque JSON objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from .enums import NotificationKind
from .open_value import OpenValue

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from .enums import Flavour

type JsonObject = Mapping[str, Any]


@dataclass(eq=False)
class NotificationGroup:
    """One row of grouped notifications.

    ``group_key`` is the key pages are deduplicated by, but equality and hashing
    follow ``most_recent_notification_id`` as servers and existing callers expect.
    Use :meth:`same_fields` for a full comparison.
    """

    group_key: str
    notifications_count: int
    kind: OpenValue[NotificationKind]
    most_recent_notification_id: int
    sample_account_ids: list[str] = field(default_factory=list[str])
    page_min_id: str | None = None
    page_max_id: str | None = None
    latest_page_notification_at: str | None = None
    status_id: str | None = None
    report: JsonObject | None = None

    def __post_init__(self) -> None:
        if self.notifications_count < 0:
            raise ValueError(
                f"notifications_count must be non-negative, got {self.notifications_count}"
            )
        self.kind = OpenValue.coerce(NotificationKind, self.kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotificationGroup):
            return NotImplemented
        return self.most_recent_notification_id == other.most_recent_notification_id

    def __hash__(self) -> int:
        return hash(self.most_recent_notification_id)

    def same_fields(self, other: NotificationGroup) -> bool:
        return all(getattr(self, f.name) == getattr(other, f.name) for f in fields(self))

    @property
    def sort_key(self) -> str:
        return self.latest_page_notification_at or ""

    def is_supported(self, flavour: Flavour | OpenValue[Flavour] | str) -> bool:
        from fedinotify.domain.capabilities import is_supported

        return is_supported(self.kind, flavour)

    def is_supported_as_push(self, flavour: Flavour | OpenValue[Flavour] | str) -> bool:
        from fedinotify.domain.capabilities import is_supported_as_push

        return is_supported_as_push(self.kind, flavour)


@dataclass
class GroupedNotificationResults:
    """Accumulated grouped notifications plus the reference data of the latest page."""

    accounts: list[JsonObject] = field(default_factory=list["JsonObject"])
    statuses: list[JsonObject] = field(default_factory=list["JsonObject"])
    notification_groups: list[NotificationGroup] = field(
        default_factory=list[NotificationGroup]
    )

    def __len__(self) -> int:
        return len(self.notification_groups)

    def __iter__(self) -> Iterator[NotificationGroup]:
        return iter(self.notification_groups)

    def group_keys(self) -> list[str]:
        return [group.group_key for group in self.notification_groups]

    def get(self, group_key: str) -> NotificationGroup | None:
        for group in self.notification_groups:
            if group.group_key == group_key:
                return group
        return None

    def merge(self, incoming: GroupedNotificationResults) -> GroupedNotificationResults:
        """Fold ``incoming`` into this collection in place (see ``merge_grouped_results``)."""

        from fedinotify.domain.merge import merge_grouped_results

        return merge_grouped_results(self, incoming)


__all__ = ["GroupedNotificationResults", "JsonObject", "NotificationGroup"]
