"""Tests for hassrest - validate the POST endpoints (mocked server)."""

from __future__ import annotations

from datetime import UTC, datetime as dt
from http import HTTPMethod
from typing import TYPE_CHECKING

from aioresponses import aioresponses

from hassrest import (
    EventParams,
    ServiceParams,
    StateParams,
    String,
    TemplateParams,
)

from .common import the_only_request, url_for
from .conftest import load_fixture
from .const import HEADERS_AUTH

if TYPE_CHECKING:
    from hassrest import HassClient


async def test_post_states(hass_client: HassClient) -> None:
    """Check the state is the body, and the echoed state is decoded."""

    params = StateParams(entity_id="sensor.sun", state="above_horizon")

    with aioresponses() as rsp:
        rsp.post(url_for("/api/states/sensor.sun"), payload=load_fixture("post_state.json"))

        result = await hass_client.post_states(params)

        method, url, kwargs = the_only_request(rsp)

    assert method == HTTPMethod.POST
    assert url == url_for("/api/states/sensor.sun")
    assert kwargs["headers"] == HEADERS_AUTH
    assert kwargs["json"] == {"state": "above_horizon", "attributes": {}}

    timestamp = dt(2023, 4, 25, 23, 49, 34, 728773, tzinfo=UTC)

    assert result == {
        "entity_id": "sensor.sun",
        "state": String("above_horizon"),
        "attributes": {},
        "last_changed": timestamp,
        "last_reported": None,
        "last_updated": timestamp,
        "context": {
            "id": "01GYXD54C8D0YFJ6ASFDGJBJR9",
            "parent_id": None,
            "user_id": "ae03ad0cefa6247baf4178ffce416910",
        },
    }


async def test_post_states_no_timestamps(hass_client: HassClient) -> None:
    """Check the timestamps of the echoed state are optional."""

    response = {"entity_id": "sensor.sun", "state": "on", "attributes": {}}

    with aioresponses() as rsp:
        rsp.post(url_for("/api/states/sensor.sun"), payload=response, status=201)

        result = await hass_client.post_states(
            StateParams(entity_id="sensor.sun", state="on")
        )

    assert result["last_changed"] is None
    assert result["last_updated"] is None
    assert result["context"] is None


async def test_post_events(hass_client: HassClient) -> None:
    """Check the event data is the body (if any)."""

    response = {"message": "Event my_event fired."}

    with aioresponses() as rsp:
        rsp.post(url_for("/api/events/my_event"), payload=response)

        result = await hass_client.post_events(EventParams(event_type="my_event"))

        _, _, kwargs = the_only_request(rsp)

    assert result == response
    assert "json" not in kwargs

    with aioresponses() as rsp:
        rsp.post(url_for("/api/events/my_event"), payload=response)

        await hass_client.post_events(
            EventParams(event_type="my_event", data={"next_rising": "tomorrow"})
        )

        _, _, kwargs = the_only_request(rsp)

    assert kwargs["json"] == {"next_rising": "tomorrow"}


async def test_post_service(hass_client: HassClient) -> None:
    """Check calling a service returns the states that changed."""

    params = ServiceParams(
        domain="light", service="turn_on", data={"entity_id": "light.kitchen"}
    )
    changed = [
        {
            "entity_id": "light.kitchen",
            "state": "on",
            "attributes": {"brightness": 255},
            "last_changed": "2023-04-25T23:55:00+00:00",
            "last_updated": "2023-04-25T23:55:00+00:00",
        }
    ]

    with aioresponses() as rsp:
        rsp.post(url_for("/api/services/light/turn_on"), payload=changed)

        result = await hass_client.post_service(params)

        _, _, kwargs = the_only_request(rsp)

    assert kwargs["json"] == {"entity_id": "light.kitchen"}
    assert result[0]["state"] == String("on")
    assert result[0]["attributes"] == {"brightness": 255}


async def test_post_template(hass_client: HassClient) -> None:
    """Check a rendered template is plaintext, whatever its content type."""

    params = TemplateParams(template="{{ states('sensor.outside_temperature') }}")

    for content_type in ("text/plain", "application/json"):
        with aioresponses() as rsp:
            rsp.post(url_for("/api/template"), body="-3.9", content_type=content_type)

            assert await hass_client.post_template(params) == "-3.9"

            _, _, kwargs = the_only_request(rsp)

        assert kwargs["json"] == {"template": "{{ states('sensor.outside_temperature') }}"}


async def test_post_config_check(hass_client: HassClient) -> None:
    """Check an invalid configuration is reported (it is not an exception)."""

    with aioresponses() as rsp:
        rsp.post(
            url_for("/api/config/core/check_config"),
            payload=load_fixture("check_config_invalid.json"),
        )

        result = await hass_client.post_config_check()

        _, _, kwargs = the_only_request(rsp)

    assert "json" not in kwargs
    assert result["result"] == "invalid"
    assert result["errors"] is not None
    assert result["errors"].startswith("Integration error")
    assert result["warnings"] is None

    with aioresponses() as rsp:
        rsp.post(url_for("/api/config/core/check_config"), payload={"result": "valid"})

        result = await hass_client.post_config_check()

    assert result == {"result": "valid", "errors": None, "warnings": None}
