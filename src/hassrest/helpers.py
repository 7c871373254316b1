"""hassrest provides an async client for the Home Assistant REST API."""

from __future__ import annotations

from datetime import UTC, datetime as dt
from typing import Any, TypeVar

from .const import _DBG_DONT_OBFUSCATE, REGEX_EMAIL_ADDRESS

_T = TypeVar("_T")


def as_aware_time(dtm: dt) -> dt:
    """Return an aware datetime, assuming that a naive datetime is in UTC."""
    return dtm.replace(tzinfo=UTC) if dtm.tzinfo is None else dtm


def as_rfc3339(dtm: dt) -> str:
    """Return a datetime as an RFC 3339 string, e.g. 2016-12-29T11:22:33+02:00.

    The offset of the datetime is preserved; a naive datetime is taken to be UTC.
    """
    return as_aware_time(dtm).isoformat()


def as_rfc3339_millis(dtm: dt) -> str:
    """Return a datetime as an RFC 3339 string with millisecond precision.

    A UTC offset is rendered as 'Z', e.g. 2022-05-01T07:00:00.000Z.
    """

    result = as_aware_time(dtm).isoformat(timespec="milliseconds")
    if result.endswith("+00:00"):
        return result[:-6] + "Z"
    return result


def obfuscate(value: bool | int | str) -> bool | int | str | None:
    """Obfuscate a value (usually to protect secrets during logging)."""

    if _DBG_DONT_OBFUSCATE:
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return 0
    if not isinstance(value, str):
        raise TypeError(f"obfuscate() expects bool | int | str, got {type(value)}")
    if REGEX_EMAIL_ADDRESS.match(value):
        return "******@obfuscated.com"
    return "********"


_KEYS_TO_OBSCURE = (
    "config_dir",
    "elevation",
    "external_url",
    "internal_url",
    "latitude",
    "location_name",
    "longitude",
    "user_id",
    "context_user_id",
)


def obscure_secrets(data: _T) -> _T:
    """Recursively obsfucate all dict/list values that might be secrets.

    Used when logging JSON received from the Home Assistant API.
    """

    def _obfuscate(val: Any) -> Any:
        if val is None:
            return None
        if isinstance(val, list):
            return [_obfuscate(v) for v in val]
        if isinstance(val, dict):
            return {k: _obfuscate(v) for k, v in val.items()}
        if not isinstance(val, str):
            return obfuscate(val)
        if REGEX_EMAIL_ADDRESS.match(val):
            return "nobody@nowhere.com"
        return "".join("*" if char != " " else " " for char in val)

    def recurse(data_: Any) -> Any:
        if isinstance(data_, list):
            return [recurse(i) for i in data_]

        if not isinstance(data_, dict):
            return data_

        return {
            k: _obfuscate(v) if k in _KEYS_TO_OBSCURE else recurse(v)
            for k, v in data_.items()
        }

    return data if _DBG_DONT_OBFUSCATE else recurse(data)  # type:ignore[no-any-return]
