"""hassrest schema - for the JSON of the GET endpoints of the REST API.

Fields that the server may omit default to None (so older, or partial, responses
will still decode); fields that the server guarantees are required.
"""
# ruff: line-length=120

from __future__ import annotations

from datetime import datetime as dt  # noqa: TC003
from typing import Any, Final, TypedDict

import voluptuous as vol

from ..values import DateVariant, StateValue  # noqa: TC001
from .const import (
    SZ_ACCUMULATED_PRECIPITATION,
    SZ_ALLOWLIST_EXTERNAL_DIRS,
    SZ_ALLOWLIST_EXTERNAL_URLS,
    SZ_ATTRIBUTES,
    SZ_COMPONENTS,
    SZ_CONFIG_DIR,
    SZ_CONFIG_SOURCE,
    SZ_CONTEXT,
    SZ_CONTEXT_USER_ID,
    SZ_COUNTRY,
    SZ_CURRENCY,
    SZ_DESCRIPTION,
    SZ_DOMAIN,
    SZ_ELEVATION,
    SZ_END,
    SZ_ENTITY_ID,
    SZ_EVENT,
    SZ_EXTERNAL_URL,
    SZ_ID,
    SZ_INTERNAL_URL,
    SZ_LANGUAGE,
    SZ_LAST_CHANGED,
    SZ_LAST_REPORTED,
    SZ_LAST_UPDATED,
    SZ_LATITUDE,
    SZ_LENGTH,
    SZ_LISTENER_COUNT,
    SZ_LOCATION,
    SZ_LOCATION_NAME,
    SZ_LONGITUDE,
    SZ_MASS,
    SZ_MESSAGE,
    SZ_NAME,
    SZ_PARENT_ID,
    SZ_PRESSURE,
    SZ_RADIUS,
    SZ_RECOVERY_MODE,
    SZ_RECURRENCE_ID,
    SZ_RRULE,
    SZ_SAFE_MODE,
    SZ_SERVICES,
    SZ_START,
    SZ_STATE,
    SZ_SUMMARY,
    SZ_TEMPERATURE,
    SZ_TIME_ZONE,
    SZ_UID,
    SZ_UNIT_SYSTEM,
    SZ_USER_ID,
    SZ_VERSION,
    SZ_VOLUME,
    SZ_WHEN,
    SZ_WHITELIST_EXTERNAL_DIRS,
    SZ_WIND_SPEED,
)
from .decoders import (
    as_date_variant,
    as_datetime,
    as_float,
    as_int,
    as_optional_datetime,
    as_optional_state_value,
    as_service_names,
)

_OPTIONAL_STR: Final = vol.Any(None, str)
_OPTIONAL_BOOL: Final = vol.Any(None, bool)
_OPTIONAL_LIST_OF_STR: Final = vol.Any(None, [str])


# GET /api/ returns this dict
class ApiStatusResponseT(TypedDict):
    message: str


# GET /api/config returns this dict
class UnitSystemT(TypedDict):
    length: str
    mass: str
    temperature: str
    volume: str
    accumulated_precipitation: str | None
    pressure: str | None
    wind_speed: str | None


class ConfigResponseT(TypedDict):
    """Response to GET /api/config."""

    components: list[str]
    config_dir: str
    elevation: int
    latitude: float
    location_name: str
    longitude: float
    time_zone: str
    unit_system: UnitSystemT
    version: str

    allowlist_external_dirs: list[str] | None
    allowlist_external_urls: list[str] | None
    config_source: str | None
    country: str | None
    currency: str | None
    external_url: str | None
    internal_url: str | None
    language: str | None
    radius: float | None
    recovery_mode: bool | None
    safe_mode: bool | None
    state: str | None
    whitelist_external_dirs: list[str] | None


# GET /api/events returns a list of these dicts
class EventEntryT(TypedDict):
    event: str
    listener_count: int


# GET /api/services returns a list of these dicts
class ServiceEntryT(TypedDict):
    domain: str
    services: list[str]


# GET /api/history/period/<timestamp> returns a list of lists of these dicts
class HistoryEntryT(TypedDict):
    """A state sample of an entity.

    With minimal_response, only the first sample of each entity has all the keys.
    """

    attributes: dict[str, Any] | None
    entity_id: str | None
    last_changed: dt | None
    last_updated: dt | None
    state: StateValue | None


# GET /api/logbook/<timestamp> returns a list of these dicts
class LogbookEntryT(TypedDict):
    context_user_id: str | None
    domain: str | None
    entity_id: str | None
    message: str | None
    name: str | None
    state: str | None
    when: dt | None


class StateContextT(TypedDict):
    id: str
    parent_id: str | None
    user_id: str | None


# GET /api/states returns a list of these dicts
class StateEntryT(TypedDict):
    attributes: dict[str, Any]
    entity_id: str
    last_changed: dt
    context: StateContextT | None
    last_reported: dt | None
    last_updated: dt | None
    state: StateValue | None


# GET /api/states/<entity_id> returns this dict
class StateEntityResponseT(TypedDict):
    attributes: dict[str, Any]
    entity_id: str
    last_changed: dt
    last_updated: dt
    context: StateContextT | None
    last_reported: dt | None
    state: StateValue | None


# GET /api/calendars returns a list of these dicts
class CalendarEntryT(TypedDict):
    entity_id: str
    name: str


# GET /api/calendars/<entity_id>?start=...&end=... returns a list of these dicts
class CalendarEventEntryT(TypedDict):
    summary: str
    start: DateVariant
    end: DateVariant
    description: str | None
    location: str | None
    recurrence_id: str | None
    rrule: str | None
    uid: str | None


def factory_api_status() -> vol.Schema:
    """Factory for the API status schema (also the response of firing an event)."""

    return vol.Schema(
        {
            vol.Required(SZ_MESSAGE): str,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_unit_system() -> vol.Schema:
    """Factory for the unit system schema."""

    return vol.Schema(
        {
            vol.Required(SZ_LENGTH): str,
            vol.Required(SZ_MASS): str,
            vol.Required(SZ_TEMPERATURE): str,
            vol.Required(SZ_VOLUME): str,
            vol.Optional(SZ_ACCUMULATED_PRECIPITATION, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_PRESSURE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_WIND_SPEED, default=None): _OPTIONAL_STR,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_config() -> vol.Schema:
    """Factory for the config schema."""

    return vol.Schema(
        {
            vol.Required(SZ_COMPONENTS): [str],
            vol.Required(SZ_CONFIG_DIR): str,
            vol.Required(SZ_ELEVATION): as_int,
            vol.Required(SZ_LATITUDE): as_float,
            vol.Required(SZ_LOCATION_NAME): str,
            vol.Required(SZ_LONGITUDE): as_float,
            vol.Required(SZ_TIME_ZONE): str,
            vol.Required(SZ_UNIT_SYSTEM): factory_unit_system(),
            vol.Required(SZ_VERSION): str,
            #
            vol.Optional(SZ_ALLOWLIST_EXTERNAL_DIRS, default=None): _OPTIONAL_LIST_OF_STR,
            vol.Optional(SZ_ALLOWLIST_EXTERNAL_URLS, default=None): _OPTIONAL_LIST_OF_STR,
            vol.Optional(SZ_CONFIG_SOURCE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_COUNTRY, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_CURRENCY, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_EXTERNAL_URL, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_INTERNAL_URL, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_LANGUAGE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_RADIUS, default=None): vol.Any(None, as_float),
            vol.Optional(SZ_RECOVERY_MODE, default=None): _OPTIONAL_BOOL,
            vol.Optional(SZ_SAFE_MODE, default=None): _OPTIONAL_BOOL,
            vol.Optional(SZ_STATE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_WHITELIST_EXTERNAL_DIRS, default=None): _OPTIONAL_LIST_OF_STR,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_events() -> vol.Schema:
    """Factory for the event catalog schema."""

    SCH_EVENT_ENTRY = vol.Schema(
        {
            vol.Required(SZ_EVENT): str,
            vol.Required(SZ_LISTENER_COUNT): as_int,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([SCH_EVENT_ENTRY])


def factory_services() -> vol.Schema:
    """Factory for the service catalog schema."""

    SCH_SERVICE_ENTRY = vol.Schema(
        {
            vol.Required(SZ_DOMAIN): str,
            vol.Required(SZ_SERVICES): as_service_names,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([SCH_SERVICE_ENTRY])


def factory_history() -> vol.Schema:
    """Factory for the history schema (a list per entity, of its state samples)."""

    SCH_HISTORY_ENTRY = vol.Schema(
        {
            vol.Optional(SZ_ATTRIBUTES, default=None): vol.Any(None, dict),
            vol.Optional(SZ_ENTITY_ID, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_LAST_CHANGED, default=None): as_optional_datetime,
            vol.Optional(SZ_LAST_UPDATED, default=None): as_optional_datetime,
            vol.Optional(SZ_STATE, default=None): as_optional_state_value,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([[SCH_HISTORY_ENTRY]])


def factory_logbook() -> vol.Schema:
    """Factory for the logbook schema."""

    SCH_LOGBOOK_ENTRY = vol.Schema(
        {
            vol.Optional(SZ_CONTEXT_USER_ID, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_DOMAIN, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_ENTITY_ID, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_MESSAGE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_NAME, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_STATE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_WHEN, default=None): as_optional_datetime,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([SCH_LOGBOOK_ENTRY])


def factory_state_context() -> vol.Schema:
    """Factory for the context of a state change."""

    return vol.Schema(
        {
            vol.Required(SZ_ID): str,
            vol.Optional(SZ_PARENT_ID, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_USER_ID, default=None): _OPTIONAL_STR,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_state_entry() -> vol.Schema:
    """Factory for the schema of the state of an entity, as an element of a list."""

    return vol.Schema(
        {
            vol.Required(SZ_ATTRIBUTES): dict,
            vol.Required(SZ_ENTITY_ID): str,
            vol.Required(SZ_LAST_CHANGED): as_datetime,
            vol.Optional(SZ_CONTEXT, default=None): vol.Any(None, factory_state_context()),
            vol.Optional(SZ_LAST_REPORTED, default=None): as_optional_datetime,
            vol.Optional(SZ_LAST_UPDATED, default=None): as_optional_datetime,
            vol.Optional(SZ_STATE, default=None): as_optional_state_value,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_states() -> vol.Schema:
    """Factory for the schema of the states of all entities."""

    return vol.Schema([factory_state_entry()])


def factory_state_of_entity() -> vol.Schema:
    """Factory for the schema of the state of a single entity."""

    return vol.Schema(
        {
            vol.Required(SZ_ATTRIBUTES): dict,
            vol.Required(SZ_ENTITY_ID): str,
            vol.Required(SZ_LAST_CHANGED): as_datetime,
            vol.Required(SZ_LAST_UPDATED): as_datetime,
            vol.Optional(SZ_CONTEXT, default=None): vol.Any(None, factory_state_context()),
            vol.Optional(SZ_LAST_REPORTED, default=None): as_optional_datetime,
            vol.Optional(SZ_STATE, default=None): as_optional_state_value,
        },
        extra=vol.REMOVE_EXTRA,
    )


def factory_calendars() -> vol.Schema:
    """Factory for the schema of the list of calendar entities."""

    SCH_CALENDAR_ENTRY = vol.Schema(
        {
            vol.Required(SZ_ENTITY_ID): str,
            vol.Required(SZ_NAME): str,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([SCH_CALENDAR_ENTRY])


def factory_calendar_events() -> vol.Schema:
    """Factory for the schema of the events of a calendar entity."""

    SCH_CALENDAR_EVENT_ENTRY = vol.Schema(
        {
            vol.Required(SZ_SUMMARY): str,
            vol.Required(SZ_START): as_date_variant,
            vol.Required(SZ_END): as_date_variant,
            vol.Optional(SZ_DESCRIPTION, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_LOCATION, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_RECURRENCE_ID, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_RRULE, default=None): _OPTIONAL_STR,
            vol.Optional(SZ_UID, default=None): _OPTIONAL_STR,
        },
        extra=vol.REMOVE_EXTRA,
    )

    return vol.Schema([SCH_CALENDAR_EVENT_ENTRY])
