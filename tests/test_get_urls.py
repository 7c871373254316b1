"""Tests for hassrest - validate the GET endpoints (mocked server)."""

from __future__ import annotations

from datetime import UTC, date, datetime as dt, timedelta as td, timezone
from http import HTTPMethod
from typing import TYPE_CHECKING

from aioresponses import aioresponses

from hassrest import (
    CalendarParams,
    Date,
    DateTime,
    Decimal,
    HistoryParams,
    Integer,
    LogbookParams,
    String,
)
from hassrest.values import Boolean

from .common import the_only_request, url_for
from .conftest import load_fixture
from .const import HEADERS_AUTH

if TYPE_CHECKING:
    from hassrest import HassClient


async def test_get_api_status(hass_client: HassClient) -> None:
    """Check the API status, and the headers of the request."""

    with aioresponses() as rsp:
        rsp.get(url_for("/api/"), payload=load_fixture("api_status.json"))

        assert await hass_client.get_api_status() == {"message": "API running."}

        method, url, kwargs = the_only_request(rsp)

    assert method == HTTPMethod.GET
    assert url == url_for("/api/")
    assert kwargs["headers"] == HEADERS_AUTH
    assert "json" not in kwargs


async def test_get_config(hass_client: HassClient) -> None:
    """Check the configuration (including its nested unit system)."""

    with aioresponses() as rsp:
        rsp.get(url_for("/api/config"), payload=load_fixture("config.json"))

        config = await hass_client.get_config()

    assert config["location_name"] == "Home"
    assert config["elevation"] == 15  # noqa: PLR2004
    assert config["latitude"] == 51.5007  # noqa: PLR2004
    assert config["radius"] == 100.0  # noqa: PLR2004
    assert config["external_url"] is None
    assert config["unit_system"]["temperature"] == "°C"
    assert config["unit_system"]["wind_speed"] == "m/s"
    assert "sun" in config["components"]


async def test_get_config_minimal(hass_client: HassClient) -> None:
    """Check optional fields of the configuration are None if absent."""

    config = load_fixture("config.json")
    for key in ("allowlist_external_dirs", "country", "radius", "safe_mode", "state"):
        del config[key]
    del config["unit_system"]["pressure"]
    config["some_new_field"] = "is ignored"

    with aioresponses() as rsp:
        rsp.get(url_for("/api/config"), payload=config)

        result = await hass_client.get_config()

    assert result["country"] is None
    assert result["radius"] is None
    assert result["safe_mode"] is None
    assert result["unit_system"]["pressure"] is None
    assert "some_new_field" not in result


async def test_get_events(hass_client: HassClient) -> None:
    with aioresponses() as rsp:
        rsp.get(url_for("/api/events"), payload=load_fixture("events.json"))

        events = await hass_client.get_events()

    assert events[0] == {"event": "state_changed", "listener_count": 5}
    assert len(events) == 3  # noqa: PLR2004


async def test_get_services(hass_client: HassClient) -> None:
    """Check services are names, whether sent as a list or as a dict."""

    with aioresponses() as rsp:
        rsp.get(url_for("/api/services"), payload=load_fixture("services.json"))

        services = await hass_client.get_services()

    assert services == [
        {"domain": "homeassistant", "services": ["restart", "stop", "check_config"]},
        {"domain": "light", "services": ["turn_on", "turn_off"]},
    ]


async def test_get_history(hass_client: HassClient) -> None:
    """Check the history window is in the URL, and the samples are decoded."""

    tz = timezone(td(hours=2))
    params = HistoryParams(
        start_time=dt(2016, 12, 29, 11, 22, 33, tzinfo=tz),
        end_time=dt(2016, 12, 30, 10, 11, 22, tzinfo=tz),
    )

    url = url_for(
        "/api/history/period/2016-12-29T11:22:33+02:00",
        {"end_time": "2016-12-30T10:11:22+02:00"},
    )

    with aioresponses() as rsp:
        rsp.get(url, payload=load_fixture("history.json"))

        history = await hass_client.get_history(params)

        _, req_url, _ = the_only_request(rsp)

    assert req_url.path == "/api/history/period/2016-12-29T11:22:33+02:00"
    assert "end_time" in req_url.query

    assert len(history) == 2  # noqa: PLR2004

    first, second, third = history[0]
    assert first["entity_id"] == "sensor.outside_temperature"
    assert first["state"] == Decimal(4.1)
    assert first["last_changed"] == dt(2016, 12, 29, 9, 22, 33, tzinfo=UTC)

    # with minimal_response, later samples have only some of the keys
    assert second["entity_id"] is None
    assert second["attributes"] is None
    assert second["state"] == Decimal(4.5)
    assert third["state"] == String("unavailable")

    assert history[1][0]["state"] == String("on")


async def test_get_logbook(hass_client: HassClient) -> None:
    with aioresponses() as rsp:
        rsp.get(
            url_for("/api/logbook", {"entity": "light.kitchen"}),
            payload=load_fixture("logbook.json"),
        )

        logbook = await hass_client.get_logbook(LogbookParams(entity="light.kitchen"))

    assert logbook[0]["name"] == "Night lights"
    assert logbook[0]["state"] is None
    assert logbook[1]["state"] == "off"
    assert logbook[1]["domain"] is None
    assert logbook[1]["when"] == dt(2016, 12, 29, 10, 1, 2, 3000, tzinfo=UTC)


async def test_get_states(hass_client: HassClient) -> None:
    """Check the states of all entities, and that their types are recovered."""

    with aioresponses() as rsp:
        rsp.get(url_for("/api/states"), payload=load_fixture("states.json"))

        states = await hass_client.get_states()

    assert [s["state"] for s in states] == [
        String("below_horizon"),
        Decimal(-3.9),
        Integer(-123),
        Boolean(False),  # noqa: FBT003
        None,
    ]

    assert states[0]["context"] == {
        "id": "01GYXD6HKAMQ1FSVT9QX6FA7Z4",
        "parent_id": None,
        "user_id": None,
    }
    assert states[2]["context"] is None
    assert states[3]["context"] is None
    assert states[3]["last_reported"] is None
    assert states[3]["last_changed"] == dt(2023, 4, 25, 23, 45, tzinfo=UTC)
    assert states[4]["last_updated"] is None


async def test_get_states_of_entity(hass_client: HassClient) -> None:
    with aioresponses() as rsp:
        rsp.get(
            url_for("/api/states/sun.sun"), payload=load_fixture("state_of_entity.json")
        )

        state = await hass_client.get_states_of_entity("sun.sun")

    assert state["entity_id"] == "sun.sun"
    assert state["state"] == String("below_horizon")
    assert state["attributes"] == {"friendly_name": "Sun", "elevation": -12.3}
    assert state["last_updated"] == dt(2023, 4, 25, 23, 51, 1, 2002, tzinfo=UTC)


async def test_get_error_log(hass_client: HassClient) -> None:
    """Check the error log is returned as plaintext."""

    text = "2023-04-25 23:49:34 ERROR (MainThread) [homeassistant] Something broke\n"

    with aioresponses() as rsp:
        rsp.get(
            url_for("/api/error_log"), body=text, content_type="text/plain"
        )

        assert await hass_client.get_error_log() == text


async def test_get_camera_proxy(hass_client: HassClient) -> None:
    """Check the image of a camera is returned as bytes."""

    image = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"

    with aioresponses() as rsp:
        rsp.get(
            url_for("/api/camera_proxy/camera.front_door"),
            body=image,
            content_type="image/png",
        )

        assert await hass_client.get_camera_proxy("camera.front_door") == image


async def test_get_calendars(hass_client: HassClient) -> None:
    with aioresponses() as rsp:
        rsp.get(url_for("/api/calendars"), payload=load_fixture("calendars.json"))

        calendars = await hass_client.get_calendars()

    assert calendars[0] == {
        "entity_id": "calendar.holidays",
        "name": "National Holidays",
    }


async def test_get_calendar_events(hass_client: HassClient) -> None:
    """Check the calendar window is in the URL, and all-day events are dates."""

    params = CalendarParams(
        entity_id="calendar.holidays",
        start=dt(2022, 5, 1, 7, tzinfo=UTC),
        end=dt(2022, 6, 12, 7, tzinfo=UTC),
    )

    url = url_for(
        "/api/calendars/calendar.holidays",
        {"start": "2022-05-01T07:00:00.000Z", "end": "2022-06-12T07:00:00.000Z"},
    )

    with aioresponses() as rsp:
        rsp.get(url, payload=load_fixture("calendar_events.json"))

        events = await hass_client.get_calendars_of_entity(params)

        _, req_url, _ = the_only_request(rsp)

    assert req_url.query["start"] == "2022-05-01T07:00:00.000Z"
    assert req_url.query["end"] == "2022-06-12T07:00:00.000Z"

    holiday, dentist = events

    assert holiday["start"] == Date(date(2022, 5, 2))
    assert holiday["end"] == Date(date(2022, 5, 3))
    assert holiday["uid"] == "20220502_bank_holiday"

    assert dentist["start"] == DateTime(dt(2022, 5, 10, 8, 30, tzinfo=UTC))
    assert dentist["location"] == "High Street"
    assert dentist["description"] is None
    assert dentist["rrule"] is None
