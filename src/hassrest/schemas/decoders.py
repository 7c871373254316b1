"""hassrest schema - the validators that decode scalar fields of the JSON.

These are attached to specific fields of the response schemas; they are not applied
to the JSON as a whole.
"""

from __future__ import annotations

import re
from datetime import date, datetime as dt
from typing import Any, Final

import voluptuous as vol

from ..values import (
    Date,
    DateTime,
    DateVariant,
    StateValue,
    state_value_from_json,
)
from .const import SZ_DATE, SZ_DATE_TIME

# RFC 3339 is stricter than ISO 8601 (and so, than dt.fromisoformat): an offset is
# required, and the date/time separator may be 'T', 't' or ' '
_REGEX_RFC3339: Final = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)
_REGEX_DATE: Final = re.compile(r"\d{4}-\d{2}-\d{2}")


def as_datetime(value: Any) -> dt:
    """Convert an RFC 3339 string into an aware datetime (keeping its offset)."""

    if not isinstance(value, str):
        raise vol.Invalid(f"expected an RFC 3339 datetime string, got {value!r}")

    if not _REGEX_RFC3339.fullmatch(value):
        raise vol.Invalid(f"Error invalid format parsing timestamp {value}")

    try:
        return dt.fromisoformat(value.upper().replace(" ", "T"))
    except ValueError as err:  # e.g. 2023-02-30T00:00:00Z
        raise vol.Invalid(f"Error {err} parsing timestamp {value}") from err


def as_optional_datetime(value: Any) -> dt | None:
    """Convert an RFC 3339 string into an aware datetime, or a null into None."""
    return None if value is None else as_datetime(value)


def as_date(value: Any) -> date:
    """Convert a YYYY-MM-DD string into a date."""

    if not isinstance(value, str) or not _REGEX_DATE.fullmatch(value):
        raise vol.Invalid(f"expected a YYYY-MM-DD date string, got {value!r}")

    try:
        return date.fromisoformat(value)
    except ValueError as err:
        raise vol.Invalid(f"Error {err} parsing date {value}") from err


def as_state_value(value: Any) -> StateValue:
    """Convert a JSON scalar into one of the four variants of StateValue."""

    try:
        return state_value_from_json(value)
    except TypeError as err:
        raise vol.Invalid(str(err)) from err


def as_optional_state_value(value: Any) -> StateValue | None:
    """Convert a JSON scalar into a StateValue, or a null into None."""
    return None if value is None else as_state_value(value)


def as_date_variant(value: Any) -> DateVariant:
    """Convert {"date": "YYYY-MM-DD"} or {"dateTime": "<RFC 3339>"} into a variant.

    Exactly one of the two keys must be present.
    """

    if not isinstance(value, dict) or len(value) != 1:
        raise vol.Invalid(
            f"expected an object with exactly one of '{SZ_DATE}' or "
            f"'{SZ_DATE_TIME}', got {value!r}"
        )

    if SZ_DATE in value:
        return Date(as_date(value[SZ_DATE]))
    if SZ_DATE_TIME in value:
        return DateTime(as_datetime(value[SZ_DATE_TIME]))

    raise vol.Invalid(f"unknown variant '{next(iter(value))}'")


def as_float(value: Any) -> float:
    """Convert a JSON number (but not a bool) into a float."""

    if isinstance(value, bool) or not isinstance(value, int | float):
        raise vol.Invalid(f"expected a number, got {value!r}")
    return float(value)


def as_int(value: Any) -> int:
    """Check a JSON number is an integer (but not a bool)."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid(f"expected an integer, got {value!r}")
    return value


def as_service_names(value: Any) -> list[str]:
    """Convert the services of a domain into a list of their names.

    Older servers send a list of names, newer ones a dict of name to description.
    """

    if isinstance(value, dict):
        value = list(value)

    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise vol.Invalid(f"expected a list of service names, got {value!r}")
    return value
