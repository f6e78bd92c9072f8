"""Core CUMTD API client functionality."""

from .exceptions import (
    ClientError,
    DecodeError,
    FormatError,
    RequestError,
    TransitApiError,
    TransportFailure,
    ValidationError,
)
from .models import CalendarDate, Route, ShapePoint, Stop
from .queries import (
    AllRoutes,
    AllStops,
    CalendarDatesByDate,
    CalendarDatesByService,
    CalendarDatesQuery,
    FullShape,
    LatLonQuery,
    LatLonQueryBuilder,
    RoutesById,
    RoutesByStop,
    RoutesQuery,
    ShapeBetweenStops,
    ShapeSpecifier,
    ShapesQuery,
    StopsById,
    StopsByLatLon,
    StopsQuery,
)
from .client import CumtdClient

__all__ = [
    "AllRoutes",
    "AllStops",
    "CalendarDate",
    "CalendarDatesByDate",
    "CalendarDatesByService",
    "CalendarDatesQuery",
    "ClientError",
    "CumtdClient",
    "DecodeError",
    "FormatError",
    "FullShape",
    "LatLonQuery",
    "LatLonQueryBuilder",
    "RequestError",
    "Route",
    "RoutesById",
    "RoutesByStop",
    "RoutesQuery",
    "ShapeBetweenStops",
    "ShapePoint",
    "ShapeSpecifier",
    "ShapesQuery",
    "Stop",
    "StopsById",
    "StopsByLatLon",
    "StopsQuery",
    "TransitApiError",
    "TransportFailure",
    "ValidationError",
]
