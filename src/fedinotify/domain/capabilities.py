"""Which notification kinds each server flavour supports.

The table is static. Flavours this build does not know about are assumed to be
newer forks and get the broad, Mastodon-compatible default rather than the
narrowest set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fedinotify.domain.model import Flavour, NotificationKind, OpenValue

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fedinotify.domain.model import NotificationGroup

type FlavourInput = Flavour | OpenValue[Flavour] | str
type KindInput = NotificationKind | OpenValue[NotificationKind] | str

ALL_KINDS: frozenset[NotificationKind] = frozenset(NotificationKind)
BASIC_PUSH_KINDS: frozenset[NotificationKind] = frozenset(
    {
        NotificationKind.FOLLOW,
        NotificationKind.MENTION,
        NotificationKind.REPOST,
        NotificationKind.FAVOURITE,
        NotificationKind.POLL,
    }
)
NO_KINDS: frozenset[NotificationKind] = frozenset()

DEFAULT_SUPPORTED_KINDS = ALL_KINDS
DEFAULT_PUSH_KINDS = BASIC_PUSH_KINDS

_PLEROMA_KINDS = frozenset(
    {
        NotificationKind.FOLLOW,
        NotificationKind.MENTION,
        NotificationKind.REPOST,
        NotificationKind.FAVOURITE,
        NotificationKind.POLL,
        NotificationKind.FOLLOW_REQUEST,
        NotificationKind.UPDATE,
        NotificationKind.MODERATION_WARNING,
    }
)

SUPPORTED_KINDS: dict[Flavour, frozenset[NotificationKind]] = {
    Flavour.MASTODON: ALL_KINDS,
    Flavour.SHARKEY: ALL_KINDS,
    Flavour.PLEROMA: _PLEROMA_KINDS,
    Flavour.AKKOMA: _PLEROMA_KINDS,
    Flavour.FRIENDICA: frozenset(
        {
            NotificationKind.FOLLOW,
            NotificationKind.MENTION,
            NotificationKind.REPOST,
            NotificationKind.FAVOURITE,
            NotificationKind.POLL,
            NotificationKind.MODERATION_WARNING,
        }
    ),
    Flavour.PIXELFED: frozenset(
        {
            NotificationKind.FOLLOW,
            NotificationKind.MENTION,
            NotificationKind.REPOST,
            NotificationKind.FAVOURITE,
            NotificationKind.MODERATION_WARNING,
        }
    ),
    Flavour.FIREFISH: frozenset(
        {
            NotificationKind.FOLLOW,
            NotificationKind.MENTION,
            NotificationKind.REPOST,
            NotificationKind.POLL,
            NotificationKind.FOLLOW_REQUEST,
            NotificationKind.MODERATION_WARNING,
        }
    ),
}

SUPPORTED_PUSH_KINDS: dict[Flavour, frozenset[NotificationKind]] = {
    Flavour.MASTODON: ALL_KINDS,
    Flavour.SHARKEY: ALL_KINDS,
    Flavour.PLEROMA: BASIC_PUSH_KINDS,
    Flavour.AKKOMA: BASIC_PUSH_KINDS,
    Flavour.FRIENDICA: BASIC_PUSH_KINDS,
    Flavour.PIXELFED: NO_KINDS,
    Flavour.FIREFISH: NO_KINDS,
}


def _known_flavour(flavour: FlavourInput) -> Flavour | None:
    return OpenValue.coerce(Flavour, flavour).value


def supported_kinds(flavour: FlavourInput) -> frozenset[NotificationKind]:
    """Return the notification kinds ``flavour`` can deliver."""

    known = _known_flavour(flavour)
    if known is None:
        return DEFAULT_SUPPORTED_KINDS
    return SUPPORTED_KINDS.get(known, DEFAULT_SUPPORTED_KINDS)


def supported_push_kinds(flavour: FlavourInput) -> frozenset[NotificationKind]:
    """Return the notification kinds ``flavour`` can deliver as push notifications."""

    known = _known_flavour(flavour)
    if known is None:
        return DEFAULT_PUSH_KINDS
    return SUPPORTED_PUSH_KINDS.get(known, DEFAULT_PUSH_KINDS)


def is_supported(kind: KindInput, flavour: FlavourInput) -> bool:
    return OpenValue.coerce(NotificationKind, kind) in supported_kinds(flavour)


def is_supported_as_push(kind: KindInput, flavour: FlavourInput) -> bool:
    return OpenValue.coerce(NotificationKind, kind) in supported_push_kinds(flavour)


def filter_supported(
    groups: Iterable[NotificationGroup], flavour: FlavourInput
) -> list[NotificationGroup]:
    """Keep the groups whose kind ``flavour`` supports, preserving order."""

    kinds = supported_kinds(flavour)
    return [group for group in groups if group.kind in kinds]


__all__ = [
    "ALL_KINDS",
    "BASIC_PUSH_KINDS",
    "DEFAULT_PUSH_KINDS",
    "DEFAULT_SUPPORTED_KINDS",
    "SUPPORTED_KINDS",
    "SUPPORTED_PUSH_KINDS",
    "filter_supported",
    "is_supported",
    "is_supported_as_push",
    "supported_kinds",
    "supported_push_kinds",
]
