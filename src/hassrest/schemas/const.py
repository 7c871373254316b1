"""hassrest schema - shared constants."""

from __future__ import annotations

from typing import Final

# These are the keys used in the JSON of the Home Assistant REST API
SZ_ACCUMULATED_PRECIPITATION: Final = "accumulated_precipitation"
SZ_ALLOWLIST_EXTERNAL_DIRS: Final = "allowlist_external_dirs"
SZ_ALLOWLIST_EXTERNAL_URLS: Final = "allowlist_external_urls"
SZ_ATTRIBUTES: Final = "attributes"

SZ_COMPONENTS: Final = "components"
SZ_CONFIG_DIR: Final = "config_dir"
SZ_CONFIG_SOURCE: Final = "config_source"
SZ_CONTEXT: Final = "context"
SZ_CONTEXT_USER_ID: Final = "context_user_id"
SZ_COUNTRY: Final = "country"
SZ_CURRENCY: Final = "currency"

SZ_DATE: Final = "date"
SZ_DATE_TIME: Final = "dateTime"
SZ_DESCRIPTION: Final = "description"
SZ_DOMAIN: Final = "domain"

SZ_ELEVATION: Final = "elevation"
SZ_END: Final = "end"
SZ_ENTITY_ID: Final = "entity_id"
SZ_ERRORS: Final = "errors"
SZ_EVENT: Final = "event"
SZ_EXTERNAL_URL: Final = "external_url"

SZ_ID: Final = "id"
SZ_INTERNAL_URL: Final = "internal_url"

SZ_LANGUAGE: Final = "language"
SZ_LAST_CHANGED: Final = "last_changed"
SZ_LAST_REPORTED: Final = "last_reported"
SZ_LAST_UPDATED: Final = "last_updated"
SZ_LATITUDE: Final = "latitude"
SZ_LENGTH: Final = "length"
SZ_LISTENER_COUNT: Final = "listener_count"
SZ_LOCATION: Final = "location"
SZ_LOCATION_NAME: Final = "location_name"
SZ_LONGITUDE: Final = "longitude"

SZ_MASS: Final = "mass"
SZ_MESSAGE: Final = "message"

SZ_NAME: Final = "name"

SZ_PARENT_ID: Final = "parent_id"
SZ_PRESSURE: Final = "pressure"

SZ_RADIUS: Final = "radius"
SZ_RECOVERY_MODE: Final = "recovery_mode"
SZ_RECURRENCE_ID: Final = "recurrence_id"
SZ_RESULT: Final = "result"
SZ_RRULE: Final = "rrule"

SZ_SAFE_MODE: Final = "safe_mode"
SZ_SERVICES: Final = "services"
SZ_START: Final = "start"
SZ_STATE: Final = "state"
SZ_SUMMARY: Final = "summary"

SZ_TEMPERATURE: Final = "temperature"
SZ_TEMPLATE: Final = "template"
SZ_TIME_ZONE: Final = "time_zone"

SZ_UID: Final = "uid"
SZ_UNIT_SYSTEM: Final = "unit_system"
SZ_USER_ID: Final = "user_id"

SZ_VERSION: Final = "version"
SZ_VOLUME: Final = "volume"

SZ_WARNINGS: Final = "warnings"
SZ_WHEN: Final = "when"
SZ_WHITELIST_EXTERNAL_DIRS: Final = "whitelist_external_dirs"
SZ_WIND_SPEED: Final = "wind_speed"
