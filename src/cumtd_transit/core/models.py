"""Data models for the CUMTD transit API.

Field names follow the service's snake-case wire names; readable accessors
are provided as properties.
"""

import datetime as dt
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..utils.wire_format import parse_wire_date


class StopPoint(BaseModel):
    """A single boarding point as it appears nested in a stop group."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ...,
        validation_alias=AliasChoices("code", "stop_code"),
        description="Short stop code",
    )
    stop_id: str = Field(..., description="Stop point identifier")
    stop_name: str = Field(..., description="Stop point name")
    stop_lat: float = Field(..., description="Latitude")
    stop_lon: float = Field(..., description="Longitude")


class StopGroup(BaseModel):
    """A parent location grouping several stop points (wire only)."""

    stop_id: str = Field(..., description="Parent location identifier")
    stop_name: str = Field(..., description="Parent location name")
    stop_points: list[StopPoint] = Field(
        default_factory=list, description="Nested stop points"
    )


class Stop(BaseModel):
    """Represents a boarding point together with its parent location.

    Two stops compare equal when their ``stop_id`` matches, whatever the
    other fields say.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Short stop code")
    stop_id: str = Field(..., description="Stop identifier")
    stop_name: str = Field(..., description="Stop name")
    stop_lat: float = Field(..., description="Latitude")
    stop_lon: float = Field(..., description="Longitude")
    location_id: str = Field("", description="Parent location identifier")
    location_name: str = Field("", description="Parent location name")

    @property
    def id(self) -> str:
        return self.stop_id

    @property
    def name(self) -> str:
        return self.stop_name

    @property
    def lat(self) -> float:
        return self.stop_lat

    @property
    def lon(self) -> float:
        return self.stop_lon

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stop):
            return NotImplemented
        return self.stop_id == other.stop_id

    def __hash__(self) -> int:
        return hash(self.stop_id)

    def __str__(self) -> str:
        return f"{self.stop_name} ({self.stop_id})"


class Route(BaseModel):
    """Represents a transit route."""

    model_config = ConfigDict(frozen=True)

    route_color: str = Field(..., description="Display color (hex, no #)")
    route_id: str = Field(..., description="Route identifier")
    route_long_name: str = Field(..., description="Long route name")
    route_short_name: str = Field(..., description="Short route name")
    route_text_color: str = Field(..., description="Text color (hex, no #)")

    @property
    def id(self) -> str:
        return self.route_id

    @property
    def color(self) -> str:
        return self.route_color

    @property
    def text_color(self) -> str:
        return self.route_text_color

    @property
    def short_name(self) -> str:
        return self.route_short_name

    @property
    def long_name(self) -> str:
        return self.route_long_name

    def __str__(self) -> str:
        return f"{self.route_short_name} {self.route_long_name}"


class ShapePoint(BaseModel):
    """One ordered point along a route geometry."""

    model_config = ConfigDict(frozen=True)

    shape_dist_traveled: float = Field(..., description="Cumulative distance")
    shape_pt_lat: float = Field(..., description="Latitude")
    shape_pt_lon: float = Field(..., description="Longitude")
    shape_pt_sequence: int = Field(..., description="Order along the shape")
    stop_id: str | None = Field(None, description="Stop at this point, if any")

    @property
    def dist_traveled(self) -> float:
        return self.shape_dist_traveled

    @property
    def lat(self) -> float:
        return self.shape_pt_lat

    @property
    def lon(self) -> float:
        return self.shape_pt_lon

    @property
    def sequence(self) -> int:
        return self.shape_pt_sequence


class CalendarDate(BaseModel):
    """A service calendar exception or inclusion for one date."""

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Calendar date")
    service_id: str = Field(..., description="Affected service identifier")

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> dt.date:
        if isinstance(value, dt.datetime):
            raise ValueError("Expected a calendar date without time of day")
        if isinstance(value, dt.date):
            return value
        return parse_wire_date(value)


class StopsResponse(BaseModel):
    """Envelope returned by the stop endpoints."""

    stops: list[StopGroup]


class RoutesResponse(BaseModel):
    """Envelope returned by the route endpoints."""

    routes: list[Route]


class ShapesResponse(BaseModel):
    """Envelope returned by the shape endpoints."""

    shapes: list[ShapePoint]


class CalendarDatesResponse(BaseModel):
    """Envelope returned by the calendar date endpoints."""

    calendar_dates: list[CalendarDate]
