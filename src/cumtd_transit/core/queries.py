"""Query variants describing how each resource may be requested.

Every resource has a closed union of variants; exactly one variant is
active per query value.
"""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


class _Query(BaseModel):
    model_config = ConfigDict(frozen=True)


class _ByIds(_Query):
    ids: list[str] = Field(..., description="Identifiers, sent in order")

    @field_validator("ids")
    @classmethod
    def _require_ids(cls, ids: list[str]) -> list[str]:
        if not ids:
            raise ValidationError("At least one identifier is required")
        return ids


class LatLonQuery(_Query):
    """A center point with an optional cap on the number of results."""

    lat: float = Field(..., description="Latitude of the center point")
    lon: float = Field(..., description="Longitude of the center point")
    count: int | None = Field(None, description="Maximum number of stops")

    @classmethod
    def builder(cls) -> "LatLonQueryBuilder":
        return LatLonQueryBuilder()


class LatLonQueryBuilder:
    """Incremental construction of a :class:`LatLonQuery`."""

    def __init__(self) -> None:
        self._lat: float | None = None
        self._lon: float | None = None
        self._count: int | None = None

    def lat(self, lat: float) -> "LatLonQueryBuilder":
        self._lat = lat
        return self

    def lon(self, lon: float) -> "LatLonQueryBuilder":
        self._lon = lon
        return self

    def count(self, count: int) -> "LatLonQueryBuilder":
        self._count = count
        return self

    def build(self) -> LatLonQuery:
        """Finalize the query.

        Raises:
            ValidationError: If latitude or longitude is unset or invalid
        """
        if self._lat is None or self._lon is None:
            raise ValidationError("Missing latitude or longitude")
        try:
            return LatLonQuery(lat=self._lat, lon=self._lon, count=self._count)
        except PydanticValidationError as e:
            raise ValidationError("Missing latitude or longitude") from e


class ShapeSpecifier(_Query):
    """A section of a shape bounded by two stops."""

    begin_stop_id: str = Field(..., description="First stop of the section")
    end_stop_id: str = Field(..., description="Last stop of the section")
    shape_id: str = Field(..., description="Shape the stops lie on")


class StopsById(_ByIds):
    kind: Literal["by_id"] = "by_id"


class AllStops(_Query):
    kind: Literal["all"] = "all"


class StopsByLatLon(_Query):
    kind: Literal["by_lat_lon"] = "by_lat_lon"
    location: LatLonQuery


StopsQuery = StopsById | AllStops | StopsByLatLon


class RoutesById(_ByIds):
    kind: Literal["by_id"] = "by_id"


class AllRoutes(_Query):
    kind: Literal["all"] = "all"


class RoutesByStop(_Query):
    kind: Literal["by_stop"] = "by_stop"
    stop_id: str = Field(..., description="Stop served by the routes")


RoutesQuery = RoutesById | AllRoutes | RoutesByStop


class FullShape(_Query):
    kind: Literal["full_shape"] = "full_shape"
    shape_id: str = Field(..., description="Shape identifier")


class ShapeBetweenStops(_Query):
    kind: Literal["between_stops"] = "between_stops"
    spec: ShapeSpecifier


ShapesQuery = FullShape | ShapeBetweenStops


class CalendarDatesByDate(_Query):
    kind: Literal["by_date"] = "by_date"
    date: dt.date = Field(..., description="Service date")


class CalendarDatesByService(_Query):
    kind: Literal["by_service"] = "by_service"
    service_id: str = Field(..., description="Service identifier")


CalendarDatesQuery = CalendarDatesByDate | CalendarDatesByService
