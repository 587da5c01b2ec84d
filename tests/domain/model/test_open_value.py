from __future__ import annotations

from enum import StrEnum

import pytest

from fedinotify.domain.model import (
    Flavour,
    Known,
    NotificationKind,
    OpenValue,
    Unknown,
    open_equals,
)


@pytest.mark.parametrize("kind", list(NotificationKind))
def test_known_symbols_round_trip_through_raw(kind: NotificationKind) -> None:
    decoded = OpenValue.decode(NotificationKind, OpenValue.of(kind).raw)

    assert decoded == Known(kind)
    assert isinstance(decoded, Known)
    assert decoded.value is kind


def test_unknown_raw_value_is_retained_verbatim() -> None:
    decoded = OpenValue.decode(NotificationKind, "new_unknown_kind")

    assert isinstance(decoded, Unknown)
    assert decoded == Unknown("new_unknown_kind")
    assert decoded.raw == "new_unknown_kind"
    assert str(decoded) == "new_unknown_kind"
    assert decoded.value is None
    assert not decoded.is_known


def test_decode_uses_wire_values_not_member_names() -> None:
    assert OpenValue.decode(NotificationKind, "reblog") == NotificationKind.REPOST
    assert not OpenValue.decode(NotificationKind, "repost").is_known
    sign_up = OpenValue.decode(NotificationKind, "admin.sign_up")
    assert sign_up.value is NotificationKind.ADMIN_SIGN_UP


def test_equality_is_by_raw_representation_across_variants() -> None:
    assert Known(NotificationKind.FOLLOW) == Unknown("follow")
    assert Unknown("follow") == Known(NotificationKind.FOLLOW)
    assert Known(NotificationKind.FOLLOW) != Unknown("follows")
    assert Unknown("a") != Unknown("b")


def test_equality_against_bare_members_in_both_orders() -> None:
    value = OpenValue.decode(NotificationKind, "follow")

    assert value == NotificationKind.FOLLOW
    assert NotificationKind.FOLLOW == value
    assert value != NotificationKind.MENTION
    assert NotificationKind.MENTION != value
    assert Unknown("poll") == NotificationKind.POLL
    assert Unknown("polls") != NotificationKind.POLL


class _LegacyKind(StrEnum):
    FOLLOW = "follow"


def test_known_values_only_equal_members_of_their_own_enum() -> None:
    value = OpenValue.of(NotificationKind.FOLLOW)

    assert value != _LegacyKind.FOLLOW
    assert _LegacyKind.FOLLOW != value
    assert value == NotificationKind.FOLLOW


def test_unknown_values_compare_by_raw_against_any_enum() -> None:
    stored = Unknown[NotificationKind]("mastodon")

    assert stored == Flavour.MASTODON
    assert Unknown("follow") == _LegacyKind.FOLLOW


def test_open_values_never_equal_none_or_plain_objects() -> None:
    value = OpenValue.of(NotificationKind.POLL)

    assert value != None  # noqa: E711
    assert value != 3
    assert value != object()


def test_open_equals_unwraps_optional_values() -> None:
    present = OpenValue.of(NotificationKind.UPDATE)

    assert open_equals(present, NotificationKind.UPDATE)
    assert open_equals(NotificationKind.UPDATE, present)
    assert open_equals(Unknown("update"), present)
    assert not open_equals(None, NotificationKind.UPDATE)
    assert not open_equals(present, None)
    assert open_equals(None, None)


def test_hash_is_consistent_with_equality_and_members() -> None:
    assert hash(Known(NotificationKind.FOLLOW)) == hash(Unknown("follow"))
    assert hash(Known(NotificationKind.FOLLOW)) == hash(NotificationKind.FOLLOW)
    assert len({Known(NotificationKind.FOLLOW), Unknown("follow")}) == 1


def test_open_values_can_be_looked_up_in_member_sets() -> None:
    kinds = frozenset({NotificationKind.FOLLOW, NotificationKind.MENTION})

    assert OpenValue.decode(NotificationKind, "mention") in kinds
    assert OpenValue.decode(NotificationKind, "poll") not in kinds
    assert OpenValue.decode(NotificationKind, "new_unknown_kind") not in kinds


def test_coerce_accepts_members_strings_and_open_values() -> None:
    existing = Unknown("custom")

    assert OpenValue.coerce(NotificationKind, existing) is existing
    assert OpenValue.coerce(NotificationKind, NotificationKind.POST) == Known(NotificationKind.POST)
    assert OpenValue.coerce(NotificationKind, "status") == Known(NotificationKind.POST)
    assert OpenValue.coerce(NotificationKind, "custom") == existing


def test_resolve_upgrades_unknown_values_when_the_enum_knows_them() -> None:
    stored = Unknown[NotificationKind]("annual_report")

    upgraded = stored.resolve(NotificationKind)

    assert isinstance(upgraded, Known)
    assert upgraded.value is NotificationKind.ANNUAL_REPORT
    assert upgraded == stored


def test_pattern_matching_on_variants() -> None:
    def describe(value: OpenValue[Flavour]) -> str:
        match value:
            case Known(symbol):
                return f"known:{symbol.value}"
            case Unknown(raw):
                return f"unknown:{raw}"
            case _:
                raise AssertionError("unreachable")

    assert describe(OpenValue.decode(Flavour, "pixelfed")) == "known:pixelfed"
    assert describe(OpenValue.decode(Flavour, "mitra")) == "unknown:mitra"


def test_open_values_are_immutable() -> None:
    value = Known(NotificationKind.FOLLOW)

    with pytest.raises(AttributeError):
        value.symbol = NotificationKind.MENTION  # type: ignore[misc]
