"""hassrest provides an async client for the Home Assistant REST API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from .auth import Auth
from .const import (
    URL_API_STATUS,
    URL_CALENDARS,
    URL_CAMERA_PROXY,
    URL_CONFIG,
    URL_ERROR_LOG,
    URL_EVENTS,
    URL_SERVICES,
    URL_STATES,
)
from .params import CheckConfigParams
from .schemas import (
    HASS_GET_API_STATUS,
    HASS_GET_CALENDAR_EVENTS,
    HASS_GET_CALENDARS,
    HASS_GET_CONFIG,
    HASS_GET_EVENTS,
    HASS_GET_HISTORY,
    HASS_GET_LOGBOOK,
    HASS_GET_SERVICES,
    HASS_GET_STATE_OF_ENTITY,
    HASS_GET_STATES,
    HASS_POST_CHECK_CONFIG,
    HASS_POST_EVENT,
    HASS_POST_SERVICE,
    HASS_POST_STATE,
)

if TYPE_CHECKING:
    from types import TracebackType

    import aiohttp

    from .params import (
        CalendarParams,
        EventParams,
        HistoryParams,
        LogbookParams,
        ServiceParams,
        StateParams,
        TemplateParams,
    )
    from .schemas import (
        ApiStatusResponseT,
        CalendarEntryT,
        CalendarEventEntryT,
        CheckConfigResponseT,
        ConfigResponseT,
        EventEntryT,
        HistoryEntryT,
        LogbookEntryT,
        MessageResponseT,
        PostStateResponseT,
        ServiceEntryT,
        StateEntityResponseT,
        StateEntryT,
    )


_LOGGER = logging.getLogger(__name__.rpartition(".")[0])


class HassClient:
    """Provide a client to access the Home Assistant REST API.

    The REST API is documented at https://developers.home-assistant.io/docs/api/rest/.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        /,
        *,
        websession: aiohttp.ClientSession | None = None,
        debug: bool = False,
    ) -> None:
        """Construct the client.

        Will not attempt to connect to the server, but will raise an
        UrlParseFailedError if the base URL is invalid. Use `get_api_status()` to
        check that the API is running.
        """

        self.logger = _LOGGER
        if debug:
            self.logger.setLevel(logging.DEBUG)
            self.logger.debug("Debug mode explicitly enabled via kwarg.")

        self.auth = Auth(base_url, token, websession, logger=self.logger)

    def __str__(self) -> str:
        """Return a string representation of this object."""
        return f"{self.__class__.__name__}(auth='{self.auth}')"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the websession, unless it was provided by the caller."""
        await self.auth.close()

    #
    # GET endpoints...

    async def get_api_status(self) -> ApiStatusResponseT:
        """Return the status of the API (the message is 'API running.' if so)."""
        return await self.auth.get_json(URL_API_STATUS, HASS_GET_API_STATUS)  # type: ignore[no-any-return]

    async def get_config(self) -> ConfigResponseT:
        """Return the current configuration of the server."""
        return await self.auth.get_json(URL_CONFIG, HASS_GET_CONFIG)  # type: ignore[no-any-return]

    async def get_events(self) -> list[EventEntryT]:
        """Return the event types, and the number of listeners of each."""
        return await self.auth.get_json(URL_EVENTS, HASS_GET_EVENTS)  # type: ignore[no-any-return]

    async def get_services(self) -> list[ServiceEntryT]:
        """Return the services of each domain."""
        return await self.auth.get_json(URL_SERVICES, HASS_GET_SERVICES)  # type: ignore[no-any-return]

    async def get_history(self, params: HistoryParams) -> list[list[HistoryEntryT]]:
        """Return the state changes in a period, as a list per entity."""
        return await self.auth.get_json(params, HASS_GET_HISTORY)  # type: ignore[no-any-return]

    async def get_logbook(self, params: LogbookParams) -> list[LogbookEntryT]:
        """Return the logbook entries in a period."""
        return await self.auth.get_json(params, HASS_GET_LOGBOOK)  # type: ignore[no-any-return]

    async def get_states(self) -> list[StateEntryT]:
        """Return the states of all entities."""
        return await self.auth.get_json(URL_STATES, HASS_GET_STATES)  # type: ignore[no-any-return]

    async def get_states_of_entity(self, entity_id: str) -> StateEntityResponseT:
        """Return the state of an entity."""
        return await self.auth.get_json(  # type: ignore[no-any-return]
            f"{URL_STATES}/{entity_id}", HASS_GET_STATE_OF_ENTITY
        )

    async def get_error_log(self) -> str:
        """Return the errors logged during the current session (as plaintext)."""
        return await self.auth.get_text(URL_ERROR_LOG)

    async def get_camera_proxy(self, entity_id: str) -> bytes:
        """Return the current image of a camera entity."""
        return await self.auth.get_bytes(f"{URL_CAMERA_PROXY}/{entity_id}")

    async def get_calendars(self) -> list[CalendarEntryT]:
        """Return the calendar entities."""
        return await self.auth.get_json(URL_CALENDARS, HASS_GET_CALENDARS)  # type: ignore[no-any-return]

    async def get_calendars_of_entity(
        self, params: CalendarParams
    ) -> list[CalendarEventEntryT]:
        """Return the events of a calendar entity, between the start and end times."""
        return await self.auth.get_json(params, HASS_GET_CALENDAR_EVENTS)  # type: ignore[no-any-return]

    #
    # POST endpoints...

    async def post_states(self, params: StateParams) -> PostStateResponseT:
        """Update (or create) the state of an entity."""
        return await self.auth.post_json(params, HASS_POST_STATE)  # type: ignore[no-any-return]

    async def post_events(self, params: EventParams) -> MessageResponseT:
        """Fire an event, with optional event data."""
        return await self.auth.post_json(params, HASS_POST_EVENT)  # type: ignore[no-any-return]

    async def post_service(self, params: ServiceParams) -> list[StateEntryT]:
        """Call a service, and return the states that changed as a result."""
        return await self.auth.post_json(params, HASS_POST_SERVICE)  # type: ignore[no-any-return]

    async def post_template(self, params: TemplateParams) -> str:
        """Render a template (the result is plaintext)."""
        return await self.auth.post_text(params)

    async def post_config_check(self) -> CheckConfigResponseT:
        """Trigger a check of the configuration (requires the config integration)."""
        return await self.auth.post_json(CheckConfigParams(), HASS_POST_CHECK_CONFIG)  # type: ignore[no-any-return]

    #
    # ...and the same endpoints, but with context if the response can't be decoded

    async def get_api_status_with_debugging(self) -> ApiStatusResponseT:
        """Return the status of the API (with context, if it can't be decoded)."""
        return await self.auth.get_json_with_debugging(  # type: ignore[no-any-return]
            URL_API_STATUS, HASS_GET_API_STATUS
        )

    async def get_config_with_debugging(self) -> ConfigResponseT:
        """Return the configuration (with context, if it can't be decoded)."""
        return await self.auth.get_json_with_debugging(URL_CONFIG, HASS_GET_CONFIG)  # type: ignore[no-any-return]

    async def get_events_with_debugging(self) -> list[EventEntryT]:
        """Return the event types (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(URL_EVENTS, HASS_GET_EVENTS)  # type: ignore[no-any-return]

    async def get_services_with_debugging(self) -> list[ServiceEntryT]:
        """Return the services (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(  # type: ignore[no-any-return]
            URL_SERVICES, HASS_GET_SERVICES
        )

    async def get_history_with_debugging(
        self, params: HistoryParams
    ) -> list[list[HistoryEntryT]]:
        """Return the state changes (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(params, HASS_GET_HISTORY)  # type: ignore[no-any-return]

    async def get_logbook_with_debugging(
        self, params: LogbookParams
    ) -> list[LogbookEntryT]:
        """Return the logbook entries (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(params, HASS_GET_LOGBOOK)  # type: ignore[no-any-return]

    async def get_states_with_debugging(self) -> list[StateEntryT]:
        """Return the states of all entities (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(URL_STATES, HASS_GET_STATES)  # type: ignore[no-any-return]

    async def get_states_of_entity_with_debugging(
        self, entity_id: str
    ) -> StateEntityResponseT:
        """Return the state of an entity (with context, if it can't be decoded)."""
        return await self.auth.get_json_with_debugging(  # type: ignore[no-any-return]
            f"{URL_STATES}/{entity_id}", HASS_GET_STATE_OF_ENTITY
        )

    async def get_calendars_with_debugging(self) -> list[CalendarEntryT]:
        """Return the calendar entities (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(  # type: ignore[no-any-return]
            URL_CALENDARS, HASS_GET_CALENDARS
        )

    async def get_calendars_of_entity_with_debugging(
        self, params: CalendarParams
    ) -> list[CalendarEventEntryT]:
        """Return the events of a calendar (with context, if they can't be decoded)."""
        return await self.auth.get_json_with_debugging(  # type: ignore[no-any-return]
            params, HASS_GET_CALENDAR_EVENTS
        )

    async def post_states_with_debugging(
        self, params: StateParams
    ) -> PostStateResponseT:
        """Update the state of an entity (with context, if it can't be decoded)."""
        return await self.auth.post_json_with_debugging(params, HASS_POST_STATE)  # type: ignore[no-any-return]

    async def post_events_with_debugging(self, params: EventParams) -> MessageResponseT:
        """Fire an event (with context, if the response can't be decoded)."""
        return await self.auth.post_json_with_debugging(params, HASS_POST_EVENT)  # type: ignore[no-any-return]

    async def post_service_with_debugging(
        self, params: ServiceParams
    ) -> list[StateEntryT]:
        """Call a service (with context, if the response can't be decoded)."""
        return await self.auth.post_json_with_debugging(params, HASS_POST_SERVICE)  # type: ignore[no-any-return]

    async def post_config_check_with_debugging(self) -> CheckConfigResponseT:
        """Check the configuration (with context, if the result can't be decoded)."""
        return await self.auth.post_json_with_debugging(  # type: ignore[no-any-return]
            CheckConfigParams(), HASS_POST_CHECK_CONFIG
        )
