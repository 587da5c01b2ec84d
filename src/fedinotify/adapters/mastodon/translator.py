"""Translate grouped notification payloads into domain entities and back."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger

from pydantic import ValidationError

from fedinotify.domain.model import GroupedNotificationResults, NotificationGroup

from .schema import GroupedNotificationsPayload, NotificationGroupPayload

log = getLogger(__name__)

type GroupedNotificationsInput = GroupedNotificationsPayload | Mapping[str, object]


class GroupedNotificationsDecodeError(ValueError):
    """Raised when a page is structurally invalid and cannot be decoded."""

    def __init__(self, source: str, error: ValidationError) -> None:
        self.source = source
        self.error = error
        super().__init__(
            f"Could not decode grouped notifications from {source}: "
            f"{error.error_count()} validation error(s)"
        )


def _ensure_payload(
    payload: GroupedNotificationsInput, *, source: str
) -> GroupedNotificationsPayload:
    if isinstance(payload, GroupedNotificationsPayload):
        return payload
    try:
        return GroupedNotificationsPayload.model_validate(payload)
    except ValidationError as exc:
        raise GroupedNotificationsDecodeError(source, exc) from exc


def _to_group(payload: NotificationGroupPayload) -> NotificationGroup:
    return NotificationGroup(
        group_key=payload.group_key,
        notifications_count=payload.notifications_count,
        kind=payload.kind,
        most_recent_notification_id=payload.most_recent_notification_id,
        sample_account_ids=list(payload.sample_account_ids),
        page_min_id=payload.page_min_id,
        page_max_id=payload.page_max_id,
        latest_page_notification_at=payload.latest_page_notification_at,
        status_id=payload.status_id,
        report=payload.report,
    )


def parse_grouped_notifications(
    payload: GroupedNotificationsInput, *, source: str = "payload"
) -> GroupedNotificationResults:
    """Decode one page into a ``GroupedNotificationResults``."""

    page = _ensure_payload(payload, source=source)
    groups = [_to_group(group) for group in page.notification_groups]

    unknown = sorted({group.kind.raw for group in groups if not group.kind.is_known})
    if unknown:
        log.info("Page %s carries notification types unknown to this build: %s", source, unknown)

    return GroupedNotificationResults(
        accounts=list(page.accounts),
        statuses=list(page.statuses),
        notification_groups=groups,
    )


def _to_payload(group: NotificationGroup) -> NotificationGroupPayload:
    return NotificationGroupPayload(
        group_key=group.group_key,
        notifications_count=group.notifications_count,
        kind=group.kind,
        most_recent_notification_id=group.most_recent_notification_id,
        sample_account_ids=list(group.sample_account_ids),
        page_min_id=group.page_min_id,
        page_max_id=group.page_max_id,
        latest_page_notification_at=group.latest_page_notification_at,
        status_id=group.status_id,
        report=dict(group.report) if group.report is not None else None,
    )


def dump_grouped_notifications(results: GroupedNotificationResults) -> dict[str, object]:
    """Encode results with the wire keys; unknown types are written back verbatim."""

    payload = GroupedNotificationsPayload(
        accounts=[dict(account) for account in results.accounts],
        statuses=[dict(status) for status in results.statuses],
        notification_groups=[_to_payload(group) for group in results.notification_groups],
    )
    return payload.model_dump(mode="json", by_alias=True)
