#!/usr/bin/env python3
"""hassrest - a CLI utility that is not a core part of the library."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from datetime import date, datetime as dt
from typing import TYPE_CHECKING, Any, Final

import aiofiles
import asyncclick as click

from hassrest import (
    CalendarParams,
    EventParams,
    HassClient,
    HistoryParams,
    LogbookParams,
    ServiceParams,
    StateParams,
    TemplateParams,
    exceptions as exc,
)
from hassrest.helpers import as_rfc3339
from hassrest.values import DateVariant, StateValue

if TYPE_CHECKING:
    from io import TextIOWrapper


SZ_CLEANUP: Final = "cleanup"
SZ_CLIENT: Final = "client"

ENV_HASS_URL: Final = "HASS_URL"
ENV_HASS_TOKEN: Final = "HASS_TOKEN"


_LOGGER: Final = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    """Convert the types that the json module does not know about."""

    if isinstance(obj, dt):
        return as_rfc3339(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, StateValue | DateVariant):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _as_json(result: Any) -> str:
    return json.dumps(result, indent=4, default=_json_default) + "\r\n\r\n"


def _check_json(ctx: click.Context, param: click.Option, value: str | None) -> Any:
    """Validate the parameter is a JSON document (and return it decoded)."""

    if value is None:
        return None

    try:
        return json.loads(value)
    except json.JSONDecodeError as err:
        raise click.BadParameter(f"must be valid JSON: {err}") from err


def _check_json_object(
    ctx: click.Context, param: click.Option, value: str | None
) -> dict[str, Any] | None:
    """Validate the parameter is a JSON object (and return it decoded)."""

    result = _check_json(ctx, param, value)
    if result is not None and not isinstance(result, dict):
        raise click.BadParameter("must be a JSON object, e.g. '{\"key\": \"value\"}'")
    return result


def _check_attributes(
    ctx: click.Context, param: click.Option, value: tuple[str, ...]
) -> dict[str, str]:
    """Validate each attribute is key=value (and return them as a dict)."""

    result: dict[str, str] = {}
    for attr in value:
        key, sep, val = attr.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"must be key=value, got '{attr}'")
        result[key] = val
    return result


async def _write(output_file: TextIOWrapper | Any, content: str) -> None:
    """Write to a file, async if possible and sync otherwise."""

    if output_file.name == "<stdout>":
        output_file.write(content)
    else:
        async with aiofiles.open(output_file.name, "w") as fp:
            await fp.write(content)


# the default formats of click.DateTime, and the same with a UTC offset
DATETIME_TYPE: Final = click.DateTime(
    formats=[
        "%Y-%m-%d",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%d %H:%M:%S%z",
    ]
)

_output_file = click.option(  # --output-file
    "--output-file",
    "-o",
    type=click.File("w"),
    default="-",
    help="The output file.",
)
_start_time = click.option(  # --start
    "--start",
    "-s",
    "start_time",
    type=DATETIME_TYPE,
    default=None,
    help="The start of the period (UTC, if no offset).",
)
_end_time = click.option(  # --end
    "--end",
    "-e",
    "end_time",
    type=DATETIME_TYPE,
    default=None,
    help="The end of the period (UTC, if no offset).",
)


@click.group()
@click.option(
    "--url", "-u", envvar=ENV_HASS_URL, required=True, help="The server's base URL."
)
@click.option(
    "--token",
    "-t",
    envvar=ENV_HASS_TOKEN,
    required=True,
    help="A long-lived access token.",
)
@click.option("--debug", "-d", is_flag=True, help="Enable debug logging.")
@click.pass_context
async def cli(
    ctx: click.Context,
    url: str,
    token: str,
    debug: bool | None = None,
) -> None:
    """A demonstration CLI for the hassrest client library."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    try:
        client = HassClient(url, token, debug=bool(debug))
    except exc.UrlParseFailedError as err:
        raise click.BadParameter(err.message, param_hint="'--url'") from err

    ctx.obj[SZ_CLIENT] = client
    ctx.obj[SZ_CLEANUP] = client.close()


@cli.command()
@_output_file
@click.pass_context
async def status(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Check that the API is running."""

    print("\r\nclient.py: Retrieving the API status...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.get_api_status()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_output_file
@click.pass_context
async def config(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Retrieve the server's configuration."""

    print("\r\nclient.py: Retrieving the configuration...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.get_config()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_output_file
@click.pass_context
async def events(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Retrieve the event types, and their listener counts."""

    print("\r\nclient.py: Retrieving the events...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.get_events()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_output_file
@click.pass_context
async def services(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Retrieve the services of each domain."""

    print("\r\nclient.py: Retrieving the services...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.get_services()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@click.argument("entity_id", required=False, default=None)
@_output_file
@click.pass_context
async def states(
    ctx: click.Context, entity_id: str | None, output_file: TextIOWrapper
) -> None:
    """Retrieve the states of all entities (or of only one entity)."""

    print("\r\nclient.py: Retrieving the states...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    if entity_id is None:
        result: Any = await client.get_states()
    else:
        result = await client.get_states_of_entity(entity_id)

    await _write(output_file, _as_json(result))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_start_time
@_end_time
@click.option(  # --entity-id
    "--entity-id",
    "-i",
    "entity_ids",
    multiple=True,
    help="An entity id to filter by (can be repeated).",
)
@click.option("--minimal", is_flag=True, help="Only return the state (and times).")
@click.option("--no-attributes", is_flag=True, help="Omit the attributes.")
@click.option("--significant", is_flag=True, help="Only significant changes.")
@_output_file
@click.pass_context
async def history(  # noqa: PLR0913
    ctx: click.Context,
    start_time: dt | None,
    end_time: dt | None,
    entity_ids: tuple[str, ...],
    minimal: bool,
    no_attributes: bool,
    significant: bool,
    output_file: TextIOWrapper,
) -> None:
    """Retrieve the state changes in a period."""

    print("\r\nclient.py: Retrieving the history...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = HistoryParams(
        start_time=start_time,
        end_time=end_time,
        filter_entity_ids=entity_ids or None,
        minimal_response=minimal,
        no_attributes=no_attributes,
        significant_changes_only=significant,
    )

    await _write(output_file, _as_json(await client.get_history(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_start_time
@_end_time
@click.option("--entity", "-i", default=None, help="The entity id to filter by.")
@_output_file
@click.pass_context
async def logbook(
    ctx: click.Context,
    start_time: dt | None,
    end_time: dt | None,
    entity: str | None,
    output_file: TextIOWrapper,
) -> None:
    """Retrieve the logbook entries in a period."""

    print("\r\nclient.py: Retrieving the logbook...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = LogbookParams(start_time=start_time, end_time=end_time, entity=entity)

    await _write(output_file, _as_json(await client.get_logbook(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="error-log")
@_output_file
@click.pass_context
async def error_log(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Retrieve the errors logged during the server's current session."""

    print("\r\nclient.py: Retrieving the error log...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, await client.get_error_log())

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@_output_file
@click.pass_context
async def calendars(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Retrieve the calendar entities."""

    print("\r\nclient.py: Retrieving the calendars...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.get_calendars()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="calendar-events")
@click.argument("entity_id")
@click.option(  # --start
    "--start",
    "-s",
    type=DATETIME_TYPE,
    required=True,
    help="The start (UTC, if no offset).",
)
@click.option(  # --end
    "--end",
    "-e",
    type=DATETIME_TYPE,
    required=True,
    help="The end (UTC, if no offset).",
)
@_output_file
@click.pass_context
async def calendar_events(
    ctx: click.Context,
    entity_id: str,
    start: dt,
    end: dt,
    output_file: TextIOWrapper,
) -> None:
    """Retrieve the events of a calendar entity."""

    print("\r\nclient.py: Retrieving the calendar events...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = CalendarParams(entity_id=entity_id, start=start, end=end)

    await _write(output_file, _as_json(await client.get_calendars_of_entity(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="set-state")
@click.argument("entity_id")
@click.argument("state")
@click.option(  # --attribute
    "--attribute",
    "-a",
    "attributes",
    multiple=True,
    callback=_check_attributes,
    help="An attribute, as key=value (can be repeated).",
)
@_output_file
@click.pass_context
async def set_state(
    ctx: click.Context,
    entity_id: str,
    state: str,
    attributes: dict[str, str],
    output_file: TextIOWrapper,
) -> None:
    """Update (or create) the state of an entity."""

    print("\r\nclient.py: Updating the state...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = StateParams(entity_id=entity_id, state=state, attributes=attributes)

    await _write(output_file, _as_json(await client.post_states(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="fire-event")
@click.argument("event_type")
@click.option(  # --data
    "--data", callback=_check_json, default=None, help="The event data (JSON)."
)
@_output_file
@click.pass_context
async def fire_event(
    ctx: click.Context, event_type: str, data: Any, output_file: TextIOWrapper
) -> None:
    """Fire an event."""

    print("\r\nclient.py: Firing the event...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = EventParams(event_type=event_type, data=data)

    await _write(output_file, _as_json(await client.post_events(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="call-service")
@click.argument("domain")
@click.argument("service")
@click.option(  # --data
    "--data",
    callback=_check_json_object,
    default=None,
    help="The service data (a JSON object).",
)
@_output_file
@click.pass_context
async def call_service(
    ctx: click.Context,
    domain: str,
    service: str,
    data: dict[str, Any] | None,
    output_file: TextIOWrapper,
) -> None:
    """Call a service, and show the states that changed as a result."""

    print("\r\nclient.py: Calling the service...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = ServiceParams(domain=domain, service=service, data=data)

    await _write(output_file, _as_json(await client.post_service(params)))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command()
@click.argument("template")
@click.pass_context
async def render(ctx: click.Context, template: str) -> None:
    """Render a template, e.g. "{{ states('sun.sun') }}"."""

    print("\r\nclient.py: Rendering the template...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    params = TemplateParams(template=template)

    await _write(sys.stdout, "\r\n" + await client.post_template(params) + "\r\n\r\n")

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


@cli.command(name="check-config")
@_output_file
@click.pass_context
async def check_config(ctx: click.Context, output_file: TextIOWrapper) -> None:
    """Check the server's configuration."""

    print("\r\nclient.py: Checking the configuration...")
    client: HassClient = ctx.obj[SZ_CLIENT]

    await _write(output_file, _as_json(await client.post_config_check()))

    await ctx.obj[SZ_CLEANUP]
    print(" - finished.\r\n")


def main() -> None:
    """Run the CLI."""

    try:
        asyncio.run(cli.main(obj={}, standalone_mode=False))  # default obj is None
    except click.ClickException as err:
        print(f"Error: {err}")
        sys.exit(-1)
    except exc.HassRestError as err:
        print(f"Error: {err}")
        sys.exit(-1)


if __name__ == "__main__":
    main()
