"""hassrest schema - for the JSON of the Home Assistant REST API."""

from __future__ import annotations

from typing import Final

from .get import (  # noqa: F401
    ApiStatusResponseT,
    CalendarEntryT,
    CalendarEventEntryT,
    ConfigResponseT,
    EventEntryT,
    HistoryEntryT,
    LogbookEntryT,
    ServiceEntryT,
    StateContextT,
    StateEntityResponseT,
    StateEntryT,
    UnitSystemT,
    factory_api_status,
    factory_calendar_events,
    factory_calendars,
    factory_config,
    factory_events,
    factory_history,
    factory_logbook,
    factory_services,
    factory_state_of_entity,
    factory_states,
)
from .post import (  # noqa: F401
    CheckConfigResponseT,
    MessageResponseT,
    PostStateResponseT,
    factory_check_config,
    factory_message,
    factory_post_state,
)

# GET /api/
HASS_GET_API_STATUS: Final = factory_api_status()

# GET /api/config
HASS_GET_CONFIG: Final = factory_config()

# GET /api/events
HASS_GET_EVENTS: Final = factory_events()

# GET /api/services
HASS_GET_SERVICES: Final = factory_services()

# GET /api/history/period/<timestamp>?filter_entity_ids=...&end_time=...
HASS_GET_HISTORY: Final = factory_history()

# GET /api/logbook/<timestamp>?entity=...&end_time=...
HASS_GET_LOGBOOK: Final = factory_logbook()

# GET /api/states
HASS_GET_STATES: Final = factory_states()

# GET /api/states/<entity_id>
HASS_GET_STATE_OF_ENTITY: Final = factory_state_of_entity()

# GET /api/calendars
HASS_GET_CALENDARS: Final = factory_calendars()

# GET /api/calendars/<entity_id>?start=...&end=...
HASS_GET_CALENDAR_EVENTS: Final = factory_calendar_events()

# POST /api/states/<entity_id>
HASS_POST_STATE: Final = factory_post_state()

# POST /api/events/<event_type>
HASS_POST_EVENT: Final = factory_message()

# POST /api/services/<domain>/<service> (returns the states that changed)
HASS_POST_SERVICE: Final = factory_states()

# POST /api/config/core/check_config
HASS_POST_CHECK_CONFIG: Final = factory_check_config()

# any endpoint, when the server reports an error (e.g. 404 Entity not found)
HASS_ERROR_RESPONSE: Final = factory_message()
