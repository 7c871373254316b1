"""Tests for hassrest - validate the composition of URLs by the transport."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aioresponses import aioresponses
from yarl import URL

from hassrest import Auth, HassClient

from .const import HEADERS_AUTH, TEST_TOKEN

if TYPE_CHECKING:
    import aiohttp


def test_url_for() -> None:
    """Check the path of the base URL is replaced, and its authority kept."""

    auth = Auth("https://hass.example.com:8443/some/prefix/", TEST_TOKEN)

    assert auth.url_for("/api/states") == URL("https://hass.example.com:8443/api/states")
    assert auth.url_for("/api/logbook", (("entity", "light.kitchen"),)) == URL(
        "https://hass.example.com:8443/api/logbook?entity=light.kitchen"
    )


def test_url_for_base_query() -> None:
    """Check the query of the base URL is kept, unless the endpoint has its own."""

    auth = Auth("http://localhost:8123/?lang=en", TEST_TOKEN)

    assert auth.url_for("/api/config") == URL("http://localhost:8123/api/config?lang=en")
    assert auth.url_for("/api/logbook", (("entity", "sun.sun"),)) == URL(
        "http://localhost:8123/api/logbook?entity=sun.sun"
    )


def test_url_for_encodes_query() -> None:
    """Check the query values are URL-encoded."""

    auth = Auth("http://localhost:8123", TEST_TOKEN)
    url = auth.url_for("/api/history/period", (("end_time", "2016-12-30T10:11:22+02:00"),))

    assert "%2B02:00" in str(url)
    assert url.query["end_time"] == "2016-12-30T10:11:22+02:00"


async def test_base_path_is_replaced(client_session: aiohttp.ClientSession) -> None:
    """Check a request is made to the endpoint's path, with the bearer token."""

    client = HassClient(
        "http://localhost:8123/lovelace/0", TEST_TOKEN, websession=client_session
    )

    with aioresponses() as rsp:
        rsp.get("http://localhost:8123/api/", payload={"message": "API running."})

        await client.get_api_status()

        rsp.assert_called_once_with(
            "http://localhost:8123/api/",
            method="GET",
            headers=HEADERS_AUTH,
            allow_redirects=True,
        )
