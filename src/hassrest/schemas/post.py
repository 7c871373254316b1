"""hassrest schema - for the JSON of the POST endpoints of the REST API."""

from __future__ import annotations

from datetime import datetime as dt  # noqa: TC003
from typing import Any, Final, TypedDict

import voluptuous as vol

from ..values import StateValue  # noqa: TC001
from .const import (
    SZ_ATTRIBUTES,
    SZ_CONTEXT,
    SZ_ENTITY_ID,
    SZ_ERRORS,
    SZ_LAST_CHANGED,
    SZ_LAST_REPORTED,
    SZ_LAST_UPDATED,
    SZ_MESSAGE,
    SZ_RESULT,
    SZ_STATE,
    SZ_WARNINGS,
)
from .decoders import as_optional_datetime, as_optional_state_value
from .get import StateContextT, factory_state_context

_OPTIONAL_STR: Final = vol.Any(None, str)


# POST /api/states/<entity_id> returns this dict
class PostStateResponseT(TypedDict):
    """Response to POST /api/states/<entity_id>.

    The timestamps are optional, as they are not sent by all versions of the server.
    """

    attributes: dict[str, Any]
    entity_id: str
    context: StateContextT | None
    last_changed: dt | None
    last_reported: dt | None
    last_updated: dt | None
    state: StateValue | None


# POST /api/events/<event_type> returns this dict
class MessageResponseT(TypedDict):
    message: str


# POST /api/config/core/check_config returns this dict
class CheckConfigResponseT(TypedDict):
    result: str  # "valid" or "invalid"
    errors: str | None
    warnings: str | None


def factory_post_state() -> vol.Schema:
    """Factory for the schema of the response to updating/creating a state."""

    return vol.Schema(
        {
            vol.Required(SZ_ATTRIBUTES): dict,
            vol.Required(SZ_ENTITY_ID): str,
            vol.Optional(SZ_CONTEXT, default=None): vol.Any(
                None, factory_state_context()
            ),
            vol.Optional(SZ_LAST_CHANGED, default=None): as_optional_datetime,
            vol.Optional(SZ_LAST_REPORTED, default=None): as_optional_datetime,
            vol.Optional(SZ_LAST_UPDATED, default=None): as_optional_datetime,
            vol.Optional(SZ_STATE, default=None): as_optional_state_value,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_message() -> vol.Schema:
    """Factory for the schema of a simple {"message": ...} response."""

    return vol.Schema(
        {
            vol.Required(SZ_MESSAGE): str,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_check_config() -> vol.Schema:
    """Factory for the schema of the result of checking the configuration."""

    return vol.Schema(
        {
            vol.Required(SZ_RESULT): str,
            vol.Optional(SZ_ERRORS, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_WARNINGS, default=None): _OPTIONAL_STR,
        },
        extra=vol.REMOVE_EXTRA,
    )
