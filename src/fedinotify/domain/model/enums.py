"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class NotificationKind(StrEnum):
    """Notification types known to this build, keyed by their wire value."""

    FOLLOW = "follow"
    MENTION = "mention"
    REPOST = "reblog"
    FAVOURITE = "favourite"
    POLL = "poll"
    FOLLOW_REQUEST = "follow_request"
    POST = "status"
    UPDATE = "update"
    ADMIN_SIGN_UP = "admin.sign_up"
    ADMIN_REPORT = "admin.report"
    SEVERED_RELATIONSHIPS = "severed_relationships"
    MODERATION_WARNING = "moderation_warning"
    ANNUAL_REPORT = "annual_report"


class Flavour(StrEnum):
    """Server implementations of the federated API."""

    MASTODON = "mastodon"
    PLEROMA = "pleroma"
    AKKOMA = "akkoma"
    FRIENDICA = "friendica"
    PIXELFED = "pixelfed"
    FIREFISH = "firefish"
    SHARKEY = "sharkey"
    CATODON = "catodon"
    ICESHRIMP = "iceshrimp"
    GOTOSOCIAL = "gotosocial"
