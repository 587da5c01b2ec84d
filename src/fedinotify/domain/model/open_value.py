"""Forward-compatible wrapper around wire enumerations.

Servers add notification types (and whole server flavours) faster than clients
ship releases. ``OpenValue`` keeps a decoded value either as a ``Known`` member of a
``StrEnum`` or as an ``Unknown`` raw string, so an unrecognised value never fails
decoding and is written back verbatim.

Two open values are equal when their raw wire strings are equal, regardless of
which variant holds them, and they compare equal to bare enum members the same
way::

    >>> kind = OpenValue.decode(NotificationKind, "reblog")
    >>> kind == NotificationKind.REPOST
    True
    >>> Unknown("reblog") == kind
    True

A ``Known`` value only equals members of its own enum. An ``Unknown`` value does
not record which enum it was decoded against, so it equals any ``StrEnum``
member with the same raw string.

Hashes are computed over the raw string, which matches ``hash(member)`` for
``StrEnum`` members, so open values can be looked up in sets of plain members.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum


class OpenValue[E: StrEnum](ABC):
    """Either a ``Known`` enum member or an ``Unknown`` raw wire string."""

    __slots__ = ()

    @property
    @abstractmethod
    def raw(self) -> str:
        """The wire representation of this value."""

    @property
    @abstractmethod
    def value(self) -> E | None:
        """The enum member, or ``None`` when this build does not know the value."""

    @property
    def is_known(self) -> bool:
        return self.value is not None

    @staticmethod
    def decode[T: StrEnum](enum_type: type[T], raw: str) -> OpenValue[T]:
        """Decode ``raw`` against ``enum_type``; never raises for unknown values."""

        try:
            return Known(enum_type(raw))
        except ValueError:
            return Unknown(raw)

    @staticmethod
    def of[T: StrEnum](symbol: T) -> OpenValue[T]:
        return Known(symbol)

    @staticmethod
    def coerce[T: StrEnum](enum_type: type[T], value: OpenValue[T] | T | str) -> OpenValue[T]:
        """Accept an open value, a member or a raw string and return an open value."""

        if isinstance(value, OpenValue):
            return value
        if isinstance(value, enum_type):
            return Known(value)
        return OpenValue.decode(enum_type, str(value))

    def resolve(self, enum_type: type[E]) -> OpenValue[E]:
        """Re-decode the retained raw string, upgrading ``Unknown`` where possible."""

        return OpenValue.decode(enum_type, self.raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OpenValue):
            return self.raw == other.raw
        if isinstance(other, StrEnum):
            known = self.value
            if known is not None and not isinstance(other, type(known)):
                return False
            return self.raw == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True, eq=False)
class Known[E: StrEnum](OpenValue[E]):
    symbol: E

    @property
    def raw(self) -> str:
        return self.symbol.value

    @property
    def value(self) -> E:
        return self.symbol


@dataclass(frozen=True, slots=True, eq=False)
class Unknown[E: StrEnum](OpenValue[E]):
    raw_value: str

    @property
    def raw(self) -> str:
        return self.raw_value

    @property
    def value(self) -> None:
        return None


def open_equals(
    lhs: OpenValue[StrEnum] | StrEnum | None,
    rhs: OpenValue[StrEnum] | StrEnum | None,
) -> bool:
    """Compare optional open values and members by raw representation.

    An absent value only equals another absent value.
    """

    if lhs is None or rhs is None:
        return lhs is None and rhs is None
    return lhs == rhs


__all__ = ["Known", "OpenValue", "Unknown", "open_equals"]
