"""Domain model for grouped notifications and open wire enumerations."""

from __future__ import annotations

from .enums import Flavour, NotificationKind
from .notifications import GroupedNotificationResults, JsonObject, NotificationGroup
from .open_value import Known, OpenValue, Unknown, open_equals

__all__ = [
    "Flavour",
    "GroupedNotificationResults",
    "JsonObject",
    "Known",
    "NotificationGroup",
    "NotificationKind",
    "OpenValue",
    "Unknown",
    "open_equals",
]
