"""Tests for hassrest - constants."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from hassrest.const import HEADERS_BASE

TEST_DIR: Final = Path(__file__).resolve().parent
FIXTURES_DIR: Final = TEST_DIR / "fixtures" / "default"

TEST_URL: Final = "http://localhost:8123"
TEST_TOKEN: Final = "-- long-lived access token --"  # noqa: S105

HEADERS_AUTH: Final = HEADERS_BASE | {"Authorization": f"Bearer {TEST_TOKEN}"}
