"""CLI main entry point for the CUMTD transit client."""

import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

import click
from pydantic import BaseModel
from rich.console import Console

from .. import __version__
from ..config import get_api_key, get_base_url, get_timeout
from ..core import (
    AllRoutes,
    AllStops,
    CalendarDatesByDate,
    CalendarDatesByService,
    ClientError,
    CumtdClient,
    DecodeError,
    FormatError,
    FullShape,
    LatLonQuery,
    RequestError,
    RoutesById,
    RoutesByStop,
    ShapeBetweenStops,
    ShapeSpecifier,
    StopsById,
    StopsByLatLon,
    ValidationError,
)
from ..utils.wire_format import parse_wire_date
from .formatters import (
    format_calendar_dates_table,
    format_json,
    format_routes_table,
    format_shapes_table,
    format_stops_table,
)

console = Console()
error_console = Console(stderr=True)

FORMAT_OPTION = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--api-key",
    help="Developer API key (defaults to $CUMTD_API_KEY)",
)
@click.option("--base-url", default=None, help="Override the service base URL")
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=None,
    help="Request timeout in seconds",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    base_url: str | None,
    timeout: int | None,
    verbose: bool,
) -> None:
    """CUMTD Transit - Query stops, routes, shapes and service calendars."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key or get_api_key()
    ctx.obj["base_url"] = base_url or get_base_url()
    ctx.obj["timeout"] = timeout or get_timeout()
    ctx.obj["verbose"] = verbose


def _run_query(
    ctx: click.Context,
    fetch: Callable[[CumtdClient], Sequence[BaseModel]],
    render: Callable[[Sequence[Any]], None],
    output_format: str,
) -> None:
    """Run one query and print its result, exiting non-zero on failure."""
    try:
        with CumtdClient(
            ctx.obj["api_key"] or "",
            base_url=ctx.obj["base_url"],
            timeout=ctx.obj["timeout"],
        ) as client:
            with console.status("[bold green]Querying CUMTD..."):
                items = fetch(client)
    except ClientError as e:
        error_console.print(f"[red]Client error:[/red] {e}")
        sys.exit(1)
    except RequestError as e:
        error_console.print(f"[red]Request error:[/red] {e}")
        sys.exit(1)
    except DecodeError as e:
        error_console.print(f"[red]Decode error:[/red] {e}")
        sys.exit(1)
    except FormatError as e:
        error_console.print(f"[red]Date format error:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        click.echo(format_json(items))
    else:
        render(items)


@cli.command()
@click.option("--id", "stop_ids", multiple=True, help="Stop ID (repeatable)")
@click.option("--lat", type=float, help="Latitude of the search center")
@click.option("--lon", type=float, help="Longitude of the search center")
@click.option("--count", type=int, help="Maximum number of nearby stops")
@FORMAT_OPTION
@click.pass_context
def stops(
    ctx: click.Context,
    stop_ids: tuple[str, ...],
    lat: float | None,
    lon: float | None,
    count: int | None,
    output_format: str,
) -> None:
    """List stops by ID, near a point, or all of them.

    Examples:
        cumtd stops --id IT --id PLAZA
        cumtd stops --lat 40.1106 --lon -88.2073 --count 5
        cumtd stops --format json
    """
    if stop_ids and (lat is not None or lon is not None):
        raise click.UsageError("Use either --id or --lat/--lon, not both")

    if stop_ids:
        query = StopsById(ids=list(stop_ids))
    elif lat is not None or lon is not None or count is not None:
        builder = LatLonQuery.builder()
        if lat is not None:
            builder.lat(lat)
        if lon is not None:
            builder.lon(lon)
        if count is not None:
            builder.count(count)
        try:
            query = StopsByLatLon(location=builder.build())
        except ValidationError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)
    else:
        query = AllStops()

    verbose = ctx.obj["verbose"]
    _run_query(
        ctx,
        lambda client: client.query_stops(query),
        lambda items: format_stops_table(items, verbose=verbose),
        output_format,
    )


@cli.command()
@click.option("--id", "route_ids", multiple=True, help="Route ID (repeatable)")
@click.option("--stop", "stop_id", help="Only routes serving this stop")
@FORMAT_OPTION
@click.pass_context
def routes(
    ctx: click.Context,
    route_ids: tuple[str, ...],
    stop_id: str | None,
    output_format: str,
) -> None:
    """List routes by ID, by stop, or all of them.

    Examples:
        cumtd routes
        cumtd routes --id ILLINI --id GREEN
        cumtd routes --stop IT
    """
    if route_ids and stop_id:
        raise click.UsageError("Use either --id or --stop, not both")

    if route_ids:
        query = RoutesById(ids=list(route_ids))
    elif stop_id:
        query = RoutesByStop(stop_id=stop_id)
    else:
        query = AllRoutes()

    _run_query(
        ctx,
        lambda client: client.query_routes(query),
        format_routes_table,
        output_format,
    )


@cli.command()
@click.argument("shape_id")
@click.option("--begin-stop", help="First stop of the section")
@click.option("--end-stop", help="Last stop of the section")
@FORMAT_OPTION
@click.pass_context
def shapes(
    ctx: click.Context,
    shape_id: str,
    begin_stop: str | None,
    end_stop: str | None,
    output_format: str,
) -> None:
    """Show the points of a shape, or of the section between two stops.

    Examples:
        cumtd shapes "[@124.0.92525366@]1"
        cumtd shapes "[@124.0.92525366@]1" --begin-stop IT:1 --end-stop PLAZA:2
    """
    if bool(begin_stop) != bool(end_stop):
        raise click.UsageError("--begin-stop and --end-stop must be given together")

    if begin_stop and end_stop:
        query = ShapeBetweenStops(
            spec=ShapeSpecifier(
                begin_stop_id=begin_stop, end_stop_id=end_stop, shape_id=shape_id
            )
        )
    else:
        query = FullShape(shape_id=shape_id)

    _run_query(
        ctx,
        lambda client: client.query_shapes(query),
        format_shapes_table,
        output_format,
    )


@cli.command("calendar-dates")
@click.option("--date", "date_str", help="Service date (YYYY-MM-DD)")
@click.option("--service", "service_id", help="Service ID")
@FORMAT_OPTION
@click.pass_context
def calendar_dates(
    ctx: click.Context,
    date_str: str | None,
    service_id: str | None,
    output_format: str,
) -> None:
    """List calendar date exceptions by date or by service.

    Examples:
        cumtd calendar-dates --date 2024-02-29
        cumtd calendar-dates --service "B1 MWF"
    """
    if bool(date_str) == bool(service_id):
        raise click.UsageError("Give exactly one of --date or --service")

    if date_str:
        try:
            query = CalendarDatesByDate(date=parse_wire_date(date_str))
        except ValueError:
            error_console.print("[red]Invalid date format. Use YYYY-MM-DD[/red]")
            sys.exit(1)
    else:
        query = CalendarDatesByService(service_id=service_id)

    _run_query(
        ctx,
        lambda client: client.query_calendar_dates(query),
        format_calendar_dates_table,
        output_format,
    )


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show current configuration."""
    api_key = ctx.obj["api_key"]
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• API key: {_mask(api_key) if api_key else 'Not configured'}")
    console.print(f"• Base URL: {ctx.obj['base_url']}")
    console.print(f"• Timeout: {ctx.obj['timeout']} seconds")


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * (len(secret) - 4) + secret[-4:]


if __name__ == "__main__":
    cli()
