"""hassrest provides an async client for the Home Assistant REST API."""

from __future__ import annotations

from typing import Any


class _HassRestBaseError(Exception):
    """The base class for all exceptions."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HassRestError(_HassRestBaseError):
    """The base class for all exceptions."""


# This occurs before any RESTful API call is made
class UrlParseFailedError(HassRestError):
    """The base URL is not a valid absolute URL (it needs a scheme and a host)."""


# These occur whilst a RESTful API call is being made
class RequestFailedError(HassRestError):
    """The API request failed for some reason (no/incomplete response).

    Could be caused by any aiohttp.ClientError, for example: ConnectionError, or by a
    timeout. If the server's status is known, then the `status` attr will have an
    integer value.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DeserializeFailedError(HassRestError):
    """The received body is not valid JSON, or is not as expected by the schema.

    For example, a required key is missing, or a timestamp is not RFC 3339.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DeserializeWithContextError(DeserializeFailedError):
    """The received body could not be decoded (with the context to debug why).

    The `path` attr is the path into the JSON tree of the offending value (empty if
    the body is not JSON at all), and the `body` attr is the raw response text.
    """

    def __init__(
        self,
        message: str,
        path: list[str | int],
        body: str,
        status: int | None = None,
    ) -> None:
        super().__init__(message, status=status)
        self.path = path
        self.body = body

    @property
    def pointer(self) -> str:
        """Return the path as a JSON pointer (RFC 6901), e.g. '/0/last_changed'."""

        def escape(token: str | int) -> str:
            return str(token).replace("~", "~0").replace("/", "~1")

        return "".join(f"/{escape(p)}" for p in self.path)


class ApiErrorResponseError(HassRestError):
    """The server reported an error, e.g. {"message": "Entity not found."}.

    Raised only by the debugging surface, when the response status is not 2xx and
    the body did not match the expected schema.
    """

    def __init__(self, message: str, status: int, body: Any) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
