"""Output formatters for CLI display."""

import json
import re
from collections.abc import Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ..core.models import CalendarDate, Route, ShapePoint, Stop

console = Console()

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")


def format_stops_table(stops: Sequence[Stop], verbose: bool = False) -> None:
    """Display stops as a rich table."""
    if not stops:
        console.print("No stops found.")
        return

    table = Table(title="Stops", show_header=True, header_style="bold magenta")
    table.add_column("Stop ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Code", style="yellow")
    table.add_column("Location", style="blue")
    if verbose:
        table.add_column("Lat", style="dim")
        table.add_column("Lon", style="dim")

    for stop in stops:
        row = [stop.id, stop.name, stop.code, stop.location_name or "-"]
        if verbose:
            row.extend([f"{stop.lat:.6f}", f"{stop.lon:.6f}"])
        table.add_row(*row)

    console.print(table)


def format_routes_table(routes: Sequence[Route]) -> None:
    """Display routes as a rich table, each row tinted with its color."""
    if not routes:
        console.print("No routes found.")
        return

    table = Table(title="Routes", show_header=True, header_style="bold magenta")
    table.add_column("Route ID", style="cyan", no_wrap=True)
    table.add_column("Short", no_wrap=True)
    table.add_column("Long Name", style="green")
    table.add_column("Color", style="dim")

    for route in routes:
        table.add_row(
            route.id,
            _colored(route.short_name, route.text_color, route.color),
            route.long_name,
            f"#{route.color}",
        )

    console.print(table)


def format_shapes_table(points: Sequence[ShapePoint]) -> None:
    """Display shape points in sequence order."""
    if not points:
        console.print("No shape points found.")
        return

    table = Table(title="Shape", show_header=True, header_style="bold magenta")
    table.add_column("Seq", style="cyan", justify="right")
    table.add_column("Lat", style="green")
    table.add_column("Lon", style="green")
    table.add_column("Distance", style="yellow", justify="right")
    table.add_column("Stop", style="blue")

    for point in sorted(points, key=lambda p: p.sequence):
        table.add_row(
            str(point.sequence),
            f"{point.lat:.6f}",
            f"{point.lon:.6f}",
            f"{point.dist_traveled:.1f}",
            point.stop_id or "-",
        )

    console.print(table)


def format_calendar_dates_table(dates: Sequence[CalendarDate]) -> None:
    """Display calendar dates as a table."""
    if not dates:
        console.print("No calendar dates found.")
        return

    table = Table(
        title="Calendar Dates", show_header=True, header_style="bold magenta"
    )
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Service ID", style="green")

    for entry in dates:
        table.add_row(entry.date.isoformat(), entry.service_id)

    console.print(table)


def format_json(items: Sequence[BaseModel]) -> str:
    """Format any list of models as JSON."""
    return json.dumps(
        [item.model_dump(mode="json") for item in items],
        ensure_ascii=False,
        indent=2,
    )


def _colored(text: str, foreground: str, background: str) -> str:
    if not (_HEX_COLOR.fullmatch(foreground) and _HEX_COLOR.fullmatch(background)):
        return text
    return f"[#{foreground} on #{background}]{text}[/]"
