"""hassrest provides an async client for the Home Assistant REST API."""

from __future__ import annotations

import json
import logging
from http import HTTPMethod
from typing import TYPE_CHECKING, Any, Final

import aiohttp
import voluptuous as vol
from yarl import URL

from . import exceptions as exc
from .const import ERR_MSG_LOOKUP, HEADERS_BASE, HINT_CHECK_NETWORK
from .helpers import obfuscate, obscure_secrets
from .params import Parameters, Request
from .schemas import HASS_ERROR_RESPONSE

if TYPE_CHECKING:
    from .params import Requestable


_LOGGER: Final = logging.getLogger(__name__)


def _is_success(status: int) -> bool:
    return 200 <= status < 300  # noqa: PLR2004


class Auth:
    """A class to provide to access the Home Assistant REST API.

    It is the transport for all requests: it composes the base URL with the path and
    query of each request, adds the bearer token, and decodes the response. It holds
    no state other than the (read-only) base URL and token, and so is safe to share
    between concurrent tasks.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        websession: aiohttp.ClientSession | None = None,
        /,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """Validate the base URL (does not contact the server).

        If no websession is provided, one is created on first use (and is closed by
        `close()`); otherwise the websession is reused, and left open.
        """

        try:
            url = URL(base_url)
        except (TypeError, ValueError) as err:
            raise exc.UrlParseFailedError(
                f"Unable to parse the URL: {base_url!r}: {err}"
            ) from err

        if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
            raise exc.UrlParseFailedError(
                f"Unable to parse the URL: {base_url!r}: "
                "expected an absolute http(s) URL, with a host"
            )

        self._url_base: Final = url
        self._token: Final = token

        self._websession = websession
        self._own_websession = websession is None

        self.logger: Final = logger or _LOGGER

    def __str__(self) -> str:
        """Return a string representation of the object."""
        return f"{self.__class__.__name__}(base='{self.url_base}')"

    @property
    def url_base(self) -> URL:
        """Return the URL base used for all requests (its path is replaced per call)."""
        return self._url_base

    @property
    def websession(self) -> aiohttp.ClientSession:
        """Return the websession, creating it if required."""

        if self._websession is None:
            self._websession = aiohttp.ClientSession()
        return self._websession

    async def close(self) -> None:
        """Close the websession, if it was created by this object."""

        if self._own_websession and self._websession is not None:
            await self._websession.close()
            self._websession = None

    def url_for(self, endpoint: str, query: tuple[tuple[str, str], ...] = ()) -> URL:
        """Return the URL of an endpoint (path), with the query pairs URL-encoded.

        The query of the base URL, if any, is kept only if there are no query pairs.
        """

        url = self._url_base.with_path(endpoint)
        if query:
            return url.with_query(list(query))
        if self._url_base.query:
            return url.with_query(self._url_base.query)
        return url

    def _headers(self) -> dict[str, str]:
        return HEADERS_BASE | {"Authorization": f"Bearer {self._token}"}

    #
    # GET requests...

    async def get_json(self, endpoint: str | Parameters, /, schema: vol.Schema) -> Any:
        """Call the REST API with a GET, and decode the JSON response.

        The endpoint is either a path, or the parameters of the endpoint.
        """

        url = self._request_url(endpoint)
        status, content, _ = await self._make_request(HTTPMethod.GET, url)
        return self._decode_json(HTTPMethod.GET, url, status, content, schema)

    async def get_json_with_debugging(
        self, endpoint: str | Parameters, /, schema: vol.Schema
    ) -> Any:
        """Call the REST API with a GET, and decode the JSON response.

        If the response cannot be decoded, the exception includes the path to the
        offending value, and the raw response.
        """

        url = self._request_url(endpoint)
        status, content, _ = await self._make_request(HTTPMethod.GET, url)
        return self._decode_json_with_context(
            HTTPMethod.GET, url, status, content, schema
        )

    async def get_text(self, endpoint: str, /) -> str:
        """Call the REST API with a GET, and return the plaintext response."""

        url = self._request_url(endpoint)
        _, content, charset = await self._make_request(HTTPMethod.GET, url)
        return content.decode(charset, errors="replace")

    async def get_bytes(self, endpoint: str, /) -> bytes:
        """Call the REST API with a GET, and return the binary response."""

        url = self._request_url(endpoint)
        _, content, _ = await self._make_request(HTTPMethod.GET, url)
        return content

    #
    # POST requests...

    async def post_json(self, params: Requestable, /, schema: vol.Schema) -> Any:
        """Call the REST API with a POST, and decode the JSON response."""

        request = params.to_request()
        url = self.url_for(request.endpoint)

        status, content, _ = await self._make_request(
            HTTPMethod.POST, url, **self._body(request.body)
        )
        return self._decode_json(HTTPMethod.POST, url, status, content, schema)

    async def post_json_with_debugging(
        self, params: Requestable, /, schema: vol.Schema
    ) -> Any:
        """Call the REST API with a POST, and decode the JSON response.

        If the response cannot be decoded, the exception includes the path to the
        offending value, and the raw response.
        """

        request = params.to_request()
        url = self.url_for(request.endpoint)

        status, content, _ = await self._make_request(
            HTTPMethod.POST, url, **self._body(request.body)
        )
        return self._decode_json_with_context(
            HTTPMethod.POST, url, status, content, schema
        )

    async def post_text(self, params: Requestable, /) -> str:
        """Call the REST API with a POST, and return the plaintext response.

        The response is not decoded, whatever its content type (e.g. a rendered
        template).
        """

        request = params.to_request()
        url = self.url_for(request.endpoint)

        _, content, charset = await self._make_request(
            HTTPMethod.POST, url, **self._body(request.body)
        )
        return content.decode(charset, errors="replace")

    #
    # helpers...

    def _request_url(self, endpoint: str | Parameters) -> URL:
        if isinstance(endpoint, Parameters):
            request = endpoint.to_request()
        else:
            request = Request(endpoint)
        return self.url_for(request.endpoint, request.query)

    @staticmethod
    def _body(body: Any | None) -> dict[str, Any]:
        """Return the kwargs for the body, if any (no body is sent for None)."""
        return {} if body is None else {"json": body}

    def _decode_json(
        self,
        method: HTTPMethod,
        url: URL,
        status: int,
        content: bytes,
        schema: vol.Schema,
    ) -> Any:
        """Decode the response, which is expected to be JSON matching the schema."""

        try:
            response = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            raise exc.DeserializeFailedError(
                f"{method} {url}: response is not valid JSON: {err}", status=status
            ) from err

        self._log_response(method, url, status, response)

        try:
            return schema(response)
        except vol.Invalid as err:
            raise exc.DeserializeFailedError(
                f"{method} {url}: response is not as expected: {err}", status=status
            ) from err

    def _decode_json_with_context(
        self,
        method: HTTPMethod,
        url: URL,
        status: int,
        content: bytes,
        schema: vol.Schema,
    ) -> Any:
        """Decode the response, raising an exception with context if unable."""

        text = content.decode("utf-8", errors="replace")

        try:
            response = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            raise exc.DeserializeWithContextError(
                f"{method} {url}: response is not valid JSON: {err}",
                [],
                text,
                status=status,
            ) from err

        self._log_response(method, url, status, response)

        try:
            return schema(response)
        except vol.Invalid as err:
            if not _is_success(status):
                self._raise_for_api_error(method, url, status, response)

            raise exc.DeserializeWithContextError(
                f"{method} {url}: response is not as expected: {err}",
                list(err.path),
                text,
                status=status,
            ) from err

    @staticmethod
    def _raise_for_api_error(
        method: HTTPMethod, url: URL, status: int, response: Any
    ) -> None:
        """Raise an ApiErrorResponseError if the response is an error message."""

        try:
            error = HASS_ERROR_RESPONSE(response)
        except vol.Invalid:
            return

        raise exc.ApiErrorResponseError(
            f"{method} {url}: {status}, message={error['message']}",
            status,
            response,
        )

    def _log_response(
        self, method: HTTPMethod, url: URL, status: int, response: Any
    ) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"{method} {url}: {status}, {obscure_secrets(response)}")

    async def _make_request(
        self, method: HTTPMethod, url: URL, /, **kwargs: Any
    ) -> tuple[int, bytes, str]:
        """Make a GET/POST request and return the status, the body and its charset.

        Will raise an exception if the request is not successful (i.e. if the body
        cannot be read); the status of the response is not checked here.
        """

        rsp: aiohttp.ClientResponse | None = None  # to prevent unbound error

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"{method} {url}: token={obfuscate(self._token)}, "
                f"body={obscure_secrets(kwargs.get('json'))}"
            )

        try:
            rsp = await self._request(method, url, headers=self._headers(), **kwargs)
            content = await rsp.read()

        except aiohttp.ClientResponseError as err:
            raise exc.RequestFailedError(
                f"{method} {url}: {err.status} {err.message}", status=err.status
            ) from err

        except (aiohttp.ClientError, TimeoutError) as err:  # e.g. ClientConnectionError
            self.logger.error(HINT_CHECK_NETWORK)  # noqa: TRY400

            raise exc.RequestFailedError(f"{method} {url}: {err}") from err

        else:
            if hint := ERR_MSG_LOOKUP.get(rsp.status):
                self.logger.warning(f"{method} {url}: {rsp.status}: {hint}")

            return rsp.status, content, rsp.charset or "utf-8"

        finally:
            if rsp is not None:
                rsp.release()

    async def _request(  # dev/test wrapper
        self, method: HTTPMethod, url: URL, /, **kwargs: Any
    ) -> aiohttp.ClientResponse:
        """Wrap the request to the ClientSession (useful for dev/test)."""
        return await self.websession.request(method, url, **kwargs)
