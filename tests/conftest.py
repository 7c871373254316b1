"""Tests for hassrest."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import aiohttp
import pytest
from aioresponses import aioresponses

from hassrest import HassClient

from .const import FIXTURES_DIR, TEST_TOKEN, TEST_URL

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator
    from pathlib import Path


@lru_cache
def _load_fixture(file: Path) -> str:
    return file.read_text()


def load_fixture(file_name: str) -> Any:
    """Load a JSON fixture (a fresh copy each time, as it may be mutated)."""
    return json.loads(_load_fixture(FIXTURES_DIR / file_name))


@pytest.fixture
def block_aiohttp() -> Generator[aioresponses]:
    """Prevent any actual I/O: will raise ClientConnectionError(Connection refused)."""
    with aioresponses() as m:
        yield m


@pytest.fixture
async def client_session() -> AsyncGenerator[aiohttp.ClientSession]:
    """Yield an aiohttp.ClientSession (requests to it can be mocked)."""

    client_session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=30))

    try:
        yield client_session
    finally:
        await client_session.close()


@pytest.fixture
async def hass_client(
    client_session: aiohttp.ClientSession,
) -> AsyncGenerator[HassClient]:
    """Yield a HassClient that uses the (mockable) client session."""

    async with HassClient(TEST_URL, TEST_TOKEN, websession=client_session) as client:
        yield client
