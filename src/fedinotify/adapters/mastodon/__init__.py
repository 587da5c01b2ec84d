"""Public interface for the grouped notifications adapter."""

from __future__ import annotations

from .schema import GroupedNotificationsPayload, NotificationGroupPayload
from .translator import (
    GroupedNotificationsDecodeError,
    GroupedNotificationsInput,
    dump_grouped_notifications,
    parse_grouped_notifications,
)

__all__ = [
    "GroupedNotificationsDecodeError",
    "GroupedNotificationsInput",
    "GroupedNotificationsPayload",
    "NotificationGroupPayload",
    "dump_grouped_notifications",
    "parse_grouped_notifications",
]
