"""Reshaping of decoded API envelopes into the models handed to callers."""

from .models import (
    CalendarDate,
    CalendarDatesResponse,
    Route,
    RoutesResponse,
    ShapePoint,
    ShapesResponse,
    Stop,
    StopGroup,
    StopsResponse,
)


def _tag_with_parent(group: StopGroup) -> list[Stop]:
    return [
        Stop(
            **point.model_dump(),
            location_id=group.stop_id,
            location_name=group.stop_name,
        )
        for point in group.stop_points
    ]


def flatten_stop_groups(groups: list[StopGroup]) -> list[Stop]:
    """Flatten stop groups into stops carrying their parent location.

    Group order and the order of points inside each group are preserved.
    Groups without points contribute nothing.

    Args:
        groups: Stop groups as decoded from the wire

    Returns:
        Flat list of stops with ``location_id``/``location_name`` set
    """
    tagged = [_tag_with_parent(group) for group in groups]

    stops: list[Stop] = []
    for group_stops in tagged:
        stops.extend(group_stops)
    return stops


def normalize_stops(response: StopsResponse) -> list[Stop]:
    return flatten_stop_groups(response.stops)


def normalize_routes(response: RoutesResponse) -> list[Route]:
    return list(response.routes)


def normalize_shapes(response: ShapesResponse) -> list[ShapePoint]:
    return list(response.shapes)


def normalize_calendar_dates(response: CalendarDatesResponse) -> list[CalendarDate]:
    return list(response.calendar_dates)
