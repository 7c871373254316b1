"""Tests for hassrest - helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from yarl import URL

from .const import TEST_URL

if TYPE_CHECKING:
    from aioresponses import aioresponses


def url_for(path: str, query: dict[str, str] | None = None) -> URL:
    """Return the URL of an endpoint of the test server."""

    url = URL(TEST_URL).with_path(path)
    return url.with_query(query) if query else url


def the_only_request(rsp: aioresponses) -> tuple[str, URL, dict[str, Any]]:
    """Return the method, URL and kwargs of the only request that was made."""

    assert len(rsp.requests) == 1
    (method, url), calls = next(iter(rsp.requests.items()))

    assert len(calls) == 1
    return str(method), url, calls[0].kwargs
