"""hassrest provides an async client for the Home Assistant REST API."""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import Final

# all _DBG_* flags are only for dev/test and should be False for published code
_DBG_DONT_OBFUSCATE = False  # default is to redact sensitive JSON in debug output

REGEX_EMAIL_ADDRESS = re.compile(
    r"^([a-zA-Z0-9_\-\.]+)@([a-zA-Z0-9_\-\.]+)\.([a-zA-Z]{2,5})$"
)

# The API declares JSON for every request, even those without a body
HEADERS_BASE: Final = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# GET resource urls
URL_API_STATUS: Final = "/api/"
URL_CONFIG: Final = "/api/config"
URL_EVENTS: Final = "/api/events"
URL_SERVICES: Final = "/api/services"
URL_HISTORY: Final = "/api/history/period"
URL_LOGBOOK: Final = "/api/logbook"
URL_STATES: Final = "/api/states"
URL_ERROR_LOG: Final = "/api/error_log"
URL_CAMERA_PROXY: Final = "/api/camera_proxy"
URL_CALENDARS: Final = "/api/calendars"

# POST resource urls
URL_TEMPLATE: Final = "/api/template"
URL_CHECK_CONFIG: Final = "/api/config/core/check_config"

HINT_CHECK_NETWORK = (
    "Unable to contact the Home Assistant server. Check your network, "
    "and that the base URL (scheme, host and port) is correct."
)
HINT_BAD_TOKEN = (
    "The bearer token was rejected. Check that the long-lived access token "
    "is valid (it may have been revoked)."
)
HINT_NOT_FOUND = "Not Found (unknown entity id, or integration not loaded?)"
HINT_RATE_LIMITED = (
    "The server is rate limiting requests. Reduce the frequency of polling."
)
HINT_SERVER_ERROR = (
    "The Home Assistant server reported an internal error. "
    "Review its error log for details."
)

ERR_MSG_LOOKUP: dict[int, str] = {
    HTTPStatus.BAD_GATEWAY: HINT_CHECK_NETWORK,
    HTTPStatus.INTERNAL_SERVER_ERROR: HINT_SERVER_ERROR,
    HTTPStatus.NOT_FOUND: HINT_NOT_FOUND,
    HTTPStatus.SERVICE_UNAVAILABLE: HINT_CHECK_NETWORK,
    HTTPStatus.TOO_MANY_REQUESTS: HINT_RATE_LIMITED,
    HTTPStatus.UNAUTHORIZED: HINT_BAD_TOKEN,
}
