"""hassrest provides an async client for the Home Assistant REST API.

Further information at: https://developers.home-assistant.io/docs/api/rest/
"""

from __future__ import annotations

from .auth import Auth
from .exceptions import (
    ApiErrorResponseError,
    DeserializeFailedError,
    DeserializeWithContextError,
    HassRestError,
    RequestFailedError,
    UrlParseFailedError,
)
from .main import HassClient
from .params import (
    CalendarParams,
    CheckConfigParams,
    EventParams,
    HistoryParams,
    LogbookParams,
    ServiceParams,
    StateParams,
    TemplateParams,
)
from .values import (
    Boolean,
    Date,
    DateTime,
    DateVariant,
    Decimal,
    Integer,
    StateValue,
    String,
)

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    "HassClient",
    "Auth",
    #
    "CalendarParams",
    "CheckConfigParams",
    "EventParams",
    "HistoryParams",
    "LogbookParams",
    "ServiceParams",
    "StateParams",
    "TemplateParams",
    #
    "StateValue",
    "Boolean",
    "Integer",
    "Decimal",
    "String",
    "DateVariant",
    "Date",
    "DateTime",
    #
    "HassRestError",
    "UrlParseFailedError",
    "RequestFailedError",
    "DeserializeFailedError",
    "DeserializeWithContextError",
    "ApiErrorResponseError",
]
