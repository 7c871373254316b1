"""hassrest - the typed parameters of the endpoints of the REST API.

A parameters object is converted into a canonical request: for a GET, the path and
an ordered list of query pairs; for a POST, the path and the (optional) JSON body.
The conversion is pure (no I/O); the query values are URL-encoded only when the URL
is finally built by the transport.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .const import (
    URL_CALENDARS,
    URL_CHECK_CONFIG,
    URL_EVENTS,
    URL_HISTORY,
    URL_LOGBOOK,
    URL_SERVICES,
    URL_STATES,
    URL_TEMPLATE,
)
from .helpers import as_rfc3339, as_rfc3339_millis
from .schemas.const import SZ_ATTRIBUTES, SZ_STATE, SZ_TEMPLATE

if TYPE_CHECKING:
    from datetime import datetime as dt


type JsonValueT = (
    dict[str, JsonValueT] | list[JsonValueT] | str | int | float | bool | None
)


@dataclass(frozen=True)
class Request:
    """A canonical GET request: the path, and the (unencoded) query pairs."""

    endpoint: str
    query: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class PostRequest:
    """A canonical POST request: the path, and the JSON body (None for no body)."""

    endpoint: str
    body: Any | None = None


class Parameters(ABC):
    """The parameters of a GET endpoint."""

    @abstractmethod
    def to_request(self) -> Request:
        """Return the canonical request for these parameters."""


class Requestable(ABC):
    """The parameters of a POST endpoint."""

    @abstractmethod
    def to_request(self) -> PostRequest:
        """Return the canonical request for these parameters."""


@dataclass(frozen=True, kw_only=True)
class HistoryParams(Parameters):
    """The parameters of GET /api/history/period[/<start_time>].

    If start_time is None, the server defaults to 1 day before the time of the
    request. If end_time is None, the server defaults to 1 day after start_time.
    """

    start_time: dt | None = None
    end_time: dt | None = None
    filter_entity_ids: tuple[str, ...] | None = None
    minimal_response: bool = False
    no_attributes: bool = False
    significant_changes_only: bool = False

    def __post_init__(self) -> None:
        if self.filter_entity_ids is not None:  # e.g. a list
            object.__setattr__(self, "filter_entity_ids", tuple(self.filter_entity_ids))

    def to_request(self) -> Request:
        endpoint = URL_HISTORY
        query: list[tuple[str, str]] = []

        if self.start_time is not None:
            endpoint += f"/{as_rfc3339(self.start_time)}"

        if self.filter_entity_ids is not None:
            query.append(("filter_entity_ids", ",".join(self.filter_entity_ids)))

        if self.end_time is not None:
            query.append(("end_time", as_rfc3339(self.end_time)))

        # the server tests for the presence of these flags, not their value
        if self.minimal_response:
            query.append(("minimal_response", "true"))

        if self.no_attributes:
            query.append(("no_attributes", "true"))

        if self.significant_changes_only:
            query.append(("significant_changes_only", "true"))

        return Request(endpoint, tuple(query))


@dataclass(frozen=True, kw_only=True)
class LogbookParams(Parameters):
    """The parameters of GET /api/logbook[/<start_time>]."""

    start_time: dt | None = None
    end_time: dt | None = None
    entity: str | None = None

    def to_request(self) -> Request:
        endpoint = URL_LOGBOOK
        query: list[tuple[str, str]] = []

        if self.start_time is not None:
            endpoint += f"/{as_rfc3339(self.start_time)}"

        if self.entity is not None:
            query.append(("entity", self.entity))

        if self.end_time is not None:
            query.append(("end_time", as_rfc3339(self.end_time)))

        return Request(endpoint, tuple(query))


@dataclass(frozen=True, kw_only=True)
class CalendarParams(Parameters):
    """The parameters of GET /api/calendars/<entity_id>?start=...&end=..."""

    entity_id: str
    start: dt
    end: dt

    def to_request(self) -> Request:
        return Request(
            f"{URL_CALENDARS}/{self.entity_id}",
            (
                ("start", as_rfc3339_millis(self.start)),
                ("end", as_rfc3339_millis(self.end)),
            ),
        )


@dataclass(frozen=True, kw_only=True)
class StateParams(Requestable):
    """The parameters of POST /api/states/<entity_id> (update, or create, a state)."""

    entity_id: str
    state: str
    attributes: dict[str, str] = field(default_factory=dict)

    def to_request(self) -> PostRequest:
        return PostRequest(
            f"{URL_STATES}/{self.entity_id}",
            {SZ_STATE: self.state, SZ_ATTRIBUTES: dict(self.attributes)},
        )


@dataclass(frozen=True, kw_only=True)
class EventParams(Requestable):
    """The parameters of POST /api/events/<event_type> (fire an event).

    If data is None, the request is sent without a body.
    """

    event_type: str
    data: JsonValueT | None = None

    def to_request(self) -> PostRequest:
        return PostRequest(f"{URL_EVENTS}/{self.event_type}", deepcopy(self.data))


@dataclass(frozen=True, kw_only=True)
class ServiceParams(Requestable):
    """The parameters of POST /api/services/<domain>/<service> (call a service).

    If data is None, the request is sent without a body.
    """

    domain: str
    service: str
    data: dict[str, JsonValueT] | None = None

    def to_request(self) -> PostRequest:
        return PostRequest(
            f"{URL_SERVICES}/{self.domain}/{self.service}", deepcopy(self.data)
        )


@dataclass(frozen=True, kw_only=True)
class TemplateParams(Requestable):
    """The parameters of POST /api/template (render a template)."""

    template: str

    def to_request(self) -> PostRequest:
        return PostRequest(URL_TEMPLATE, {SZ_TEMPLATE: self.template})


@dataclass(frozen=True)
class CheckConfigParams(Requestable):
    """The (absent) parameters of POST /api/config/core/check_config."""

    def to_request(self) -> PostRequest:
        return PostRequest(URL_CHECK_CONFIG)
