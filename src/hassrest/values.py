"""hassrest - the polymorphic values of the Home Assistant REST API.

The state of an entity is not tagged by the server: the same field may hold a bool,
an integer, a decimal or a string, and numbers are often sent as strings (e.g. a
sensor reporting "-3.9"). A StateValue recovers the type, as one of four variants.

Calendar events are either all-day (a date) or timed (a datetime): a DateVariant is
one of two variants.
"""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from datetime import date, datetime as dt


_INT64_MIN: Final = -(2**63)
_INT64_MAX: Final = 2**63 - 1
_UINT64_MAX: Final = 2**64 - 1

# str.isdigit(), int() & float() are more lenient than a JSON API warrants (they allow
# whitespace, underscores and non-ASCII digits), so the accepted forms are explicit
_REGEX_INTEGER: Final = re.compile(r"[+-]?[0-9]+")
_REGEX_DECIMAL: Final = re.compile(
    r"[+-]?(inf|infinity|nan|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class StateValue:
    """The base class of the four variants of an entity's state."""

    __slots__ = ()

    value: bool | int | float | str


@dataclass(frozen=True, slots=True)
class Boolean(StateValue):
    """A state that is a bool, e.g. true (or "true")."""

    value: bool


@dataclass(frozen=True, slots=True)
class Integer(StateValue):
    """A state that is a signed 64-bit integer, e.g. -123 (or "-123")."""

    value: int


@dataclass(frozen=True, slots=True, eq=False)
class Decimal(StateValue):
    """A state that is a 64-bit float, e.g. -3.9 (or "-3.9").

    Two decimals are equal only if their IEEE-754 representations are identical, so
    compare `.value` with a tolerance where it matters.
    """

    value: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decimal):
            return NotImplemented
        return _as_bits(self.value) == _as_bits(other.value)

    def __hash__(self) -> int:
        return hash((Decimal, _as_bits(self.value)))


@dataclass(frozen=True, slots=True)
class String(StateValue):
    """A state that is text that does not look like any other variant."""

    value: str


def _as_bits(value: float) -> bytes:
    return struct.pack("<d", value)


def _as_int64(value: int) -> int | None:
    """Return the value as a signed 64-bit integer, or None if it cannot be one.

    Unsigned values beyond the signed range are truncated (two's complement), so
    2**64 - 1 becomes -1. This is lossy by policy.
    """

    if _INT64_MIN <= value <= _INT64_MAX:
        return value
    if _INT64_MAX < value <= _UINT64_MAX:
        return value - 2**64
    return None


def state_value_from_str(value: str) -> StateValue:
    """Return the StateValue of a string, recovering a scalar type if possible.

    The order of the attempts is significant: bool, then integer, then decimal.
    """

    if value in ("true", "false"):
        return Boolean(value == "true")

    if _REGEX_INTEGER.fullmatch(value):
        if _INT64_MIN <= (int_value := int(value)) <= _INT64_MAX:
            return Integer(int_value)

    if _REGEX_DECIMAL.fullmatch(value):
        return Decimal(float(value))

    return String(value)


def state_value_from_json(value: Any) -> StateValue:
    """Return the StateValue of a (decoded) JSON scalar.

    Raise a TypeError if the value is not a scalar (i.e. is null, array or object).
    """

    if isinstance(value, bool):  # NOTE: bool is a subclass of int
        return Boolean(value)

    if isinstance(value, int):
        if (int_value := _as_int64(value)) is not None:
            return Integer(int_value)
        return Decimal(float(value))  # beyond 64 bits, JSON numbers are floats

    if isinstance(value, float):
        return Decimal(value)

    if isinstance(value, str):
        return state_value_from_str(value)

    raise TypeError(
        f"expected bool, integer, decimal or string value, got {type(value).__name__}"
    )


class DateVariant:
    """The base class of the two variants of a calendar event's start/end."""

    __slots__ = ()

    value: date | dt


@dataclass(frozen=True, slots=True)
class Date(DateVariant):
    """The start/end of an all-day event (a date without a time of day)."""

    value: date


@dataclass(frozen=True, slots=True)
class DateTime(DateVariant):
    """The start/end of a timed event (an aware datetime)."""

    value: dt
