"""Mapping of query variants to concrete API requests."""

from typing import assert_never

from pydantic import BaseModel, ConfigDict, Field

from ..utils.wire_format import format_decimal, format_wire_date
from .queries import (
    AllRoutes,
    AllStops,
    CalendarDatesByDate,
    CalendarDatesByService,
    CalendarDatesQuery,
    FullShape,
    RoutesById,
    RoutesByStop,
    RoutesQuery,
    ShapeBetweenStops,
    ShapesQuery,
    StopsById,
    StopsByLatLon,
    StopsQuery,
)

DEFAULT_BASE_URL = "https://developer.cumtd.com/api/v2.2/json"
ID_SEPARATOR = ";"


class ApiRequest(BaseModel):
    """An endpoint path and its ordered query parameters."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(..., description="Endpoint name, e.g. 'getstop'")
    params: list[tuple[str, str]] = Field(
        default_factory=list, description="Ordered query parameters"
    )

    def url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        """Join the endpoint onto a base URL."""
        return f"{base_url.rstrip('/')}/{self.endpoint}"


def _join_ids(ids: list[str]) -> str:
    return ID_SEPARATOR.join(ids)


def build_stops_request(api_key: str, query: StopsQuery) -> ApiRequest:
    """Build the request for a stops query."""
    match query:
        case StopsById(ids=ids):
            return ApiRequest(
                endpoint="getstop",
                params=[("key", api_key), ("stop_id", _join_ids(ids))],
            )
        case AllStops():
            return ApiRequest(endpoint="getstops", params=[("key", api_key)])
        case StopsByLatLon(location=location):
            params = [
                ("key", api_key),
                ("lat", format_decimal(location.lat)),
                ("lon", format_decimal(location.lon)),
            ]
            if location.count is not None:
                params.append(("count", format_decimal(location.count)))
            return ApiRequest(endpoint="getstopsbylatlon", params=params)
        case _:
            assert_never(query)


def build_routes_request(api_key: str, query: RoutesQuery) -> ApiRequest:
    """Build the request for a routes query."""
    match query:
        case RoutesById(ids=ids):
            return ApiRequest(
                endpoint="getroute",
                params=[("key", api_key), ("route_id", _join_ids(ids))],
            )
        case AllRoutes():
            return ApiRequest(endpoint="getroutes", params=[("key", api_key)])
        case RoutesByStop(stop_id=stop_id):
            return ApiRequest(
                endpoint="getroutesbystop",
                params=[("key", api_key), ("stop_id", stop_id)],
            )
        case _:
            assert_never(query)


def build_shapes_request(api_key: str, query: ShapesQuery) -> ApiRequest:
    """Build the request for a shapes query."""
    match query:
        case FullShape(shape_id=shape_id):
            return ApiRequest(
                endpoint="getshape",
                params=[("key", api_key), ("shape_id", shape_id)],
            )
        case ShapeBetweenStops(spec=spec):
            return ApiRequest(
                endpoint="getshapebetweenstops",
                params=[
                    ("key", api_key),
                    ("begin_stop_id", spec.begin_stop_id),
                    ("end_stop_id", spec.end_stop_id),
                    ("shape_id", spec.shape_id),
                ],
            )
        case _:
            assert_never(query)


def build_calendar_dates_request(
    api_key: str, query: CalendarDatesQuery
) -> ApiRequest:
    """Build the request for a calendar dates query.

    Raises:
        FormatError: If the query date cannot be rendered as wire text
    """
    match query:
        case CalendarDatesByDate(date=date):
            return ApiRequest(
                endpoint="getcalendardatesbydate",
                params=[("key", api_key), ("date", format_wire_date(date))],
            )
        case CalendarDatesByService(service_id=service_id):
            # The service-id lookup shares the by-date endpoint.
            return ApiRequest(
                endpoint="getcalendardatesbydate",
                params=[("key", api_key), ("service_id", service_id)],
            )
        case _:
            assert_never(query)
