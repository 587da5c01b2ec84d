"""Pydantic models describing the grouped notifications API payloads."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from fedinotify.domain.model import NotificationKind, OpenValue


def _decode_kind(value: object) -> OpenValue[NotificationKind]:
    if isinstance(value, OpenValue):
        return value.resolve(NotificationKind)
    if not isinstance(value, str):
        raise ValueError(f"Notification type must be a string, got {type(value).__name__}")
    return OpenValue.decode(NotificationKind, value)


def _encode_kind(value: OpenValue[NotificationKind]) -> str:
    return value.raw


NotificationKindField = Annotated[
    OpenValue[NotificationKind],
    PlainValidator(_decode_kind),
    PlainSerializer(_encode_kind, return_type=str),
]


class MastodonBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, arbitrary_types_allowed=True)


class NotificationGroupPayload(MastodonBaseModel):
    group_key: str
    notifications_count: int = Field(ge=0)
    kind: NotificationKindField = Field(alias="type")
    most_recent_notification_id: int
    sample_account_ids: list[str] = Field(default_factory=list)
    page_min_id: str | None = None
    page_max_id: str | None = None
    latest_page_notification_at: str | None = None
    status_id: str | None = None
    report: dict[str, Any] | None = None


class GroupedNotificationsPayload(MastodonBaseModel):
    accounts: list[dict[str, Any]] = Field(default_factory=list)
    statuses: list[dict[str, Any]] = Field(default_factory=list)
    notification_groups: list[NotificationGroupPayload] = Field(default_factory=list)
