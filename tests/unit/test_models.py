"""Unit tests for data models."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from cumtd_transit.core.models import (
    CalendarDate,
    CalendarDatesResponse,
    Route,
    RoutesResponse,
    ShapePoint,
    Stop,
    StopGroup,
    StopPoint,
    StopsResponse,
)


class TestStop:
    """Test Stop model."""

    def test_stop_accessors(self):
        """Test readable accessors over wire field names."""
        stop = Stop(
            code="MTD3121",
            stop_id="IT:1",
            stop_name="Illinois Terminal (Platform A)",
            stop_lat=40.115935,
            stop_lon=-88.240947,
            location_id="IT",
            location_name="Illinois Terminal",
        )

        assert stop.id == "IT:1"
        assert stop.name == "Illinois Terminal (Platform A)"
        assert stop.code == "MTD3121"
        assert stop.lat == 40.115935
        assert stop.lon == -88.240947
        assert stop.location_id == "IT"
        assert str(stop) == "Illinois Terminal (Platform A) (IT:1)"

    def test_stop_equality_uses_id_only(self):
        """Test that stops with the same id are equal even if other fields differ."""
        first = Stop(
            code="A", stop_id="IT:1", stop_name="Old", stop_lat=1.0, stop_lon=2.0
        )
        second = Stop(
            code="B", stop_id="IT:1", stop_name="New", stop_lat=3.0, stop_lon=4.0
        )
        other = Stop(
            code="A", stop_id="IT:2", stop_name="Old", stop_lat=1.0, stop_lon=2.0
        )

        assert first == second
        assert hash(first) == hash(second)
        assert first != other
        assert len({first, second, other}) == 2

    def test_stop_is_read_only(self):
        """Test that stops cannot be mutated after construction."""
        stop = Stop(code="A", stop_id="X", stop_name="X", stop_lat=0, stop_lon=0)

        with pytest.raises(PydanticValidationError):
            stop.stop_name = "changed"

    def test_location_defaults_empty(self):
        """Test that parent location fields default to empty strings."""
        stop = Stop(code="A", stop_id="X", stop_name="X", stop_lat=0, stop_lon=0)
        assert stop.location_id == ""
        assert stop.location_name == ""


class TestStopWireModels:
    """Test stop group and stop point decoding."""

    def test_stop_point_accepts_stop_code_alias(self):
        """Test that ``stop_code`` is accepted in place of ``code``."""
        point = StopPoint.model_validate(
            {
                "stop_code": "MTD1",
                "stop_id": "A:1",
                "stop_name": "A",
                "stop_lat": 1.5,
                "stop_lon": 2.5,
            }
        )
        assert point.code == "MTD1"

    def test_stops_response_ignores_envelope_extras(self, sample_stops_response):
        """Test decoding a full envelope with status and request fields."""
        response = StopsResponse.model_validate(sample_stops_response)

        assert len(response.stops) == 2
        assert isinstance(response.stops[0], StopGroup)
        assert response.stops[0].stop_id == "IT"
        assert len(response.stops[0].stop_points) == 2

    def test_stop_point_missing_field(self):
        """Test that a missing coordinate fails validation."""
        with pytest.raises(PydanticValidationError):
            StopPoint.model_validate(
                {"code": "A", "stop_id": "A:1", "stop_name": "A", "stop_lat": 1.0}
            )


class TestRoute:
    """Test Route model."""

    def test_route_accessors(self, sample_route_data):
        """Test route accessors."""
        route = Route.model_validate(sample_route_data)

        assert route.id == "1"
        assert route.short_name == "1"
        assert route.long_name == "One"
        assert route.color == "FF0000"
        assert route.text_color == "FFFFFF"
        assert str(route) == "1 One"

    def test_route_equality(self, sample_route_data):
        """Test that routes compare by value."""
        assert Route.model_validate(sample_route_data) == Route.model_validate(
            sample_route_data
        )

    def test_routes_response(self, sample_route_data):
        """Test routes envelope decoding."""
        response = RoutesResponse.model_validate({"routes": [sample_route_data]})
        assert response.routes[0].route_id == "1"


class TestShapePoint:
    """Test ShapePoint model."""

    def test_shape_point_with_stop(self):
        """Test a shape point that coincides with a stop."""
        point = ShapePoint(
            shape_dist_traveled=12.5,
            shape_pt_lat=40.1,
            shape_pt_lon=-88.2,
            shape_pt_sequence=4,
            stop_id="IT:1",
        )

        assert point.sequence == 4
        assert point.dist_traveled == 12.5
        assert point.lat == 40.1
        assert point.lon == -88.2
        assert point.stop_id == "IT:1"

    def test_shape_point_without_stop(self):
        """Test that stop_id is optional."""
        point = ShapePoint.model_validate(
            {
                "shape_dist_traveled": 0,
                "shape_pt_lat": 40.1,
                "shape_pt_lon": -88.2,
                "shape_pt_sequence": 1,
            }
        )
        assert point.stop_id is None


class TestCalendarDate:
    """Test CalendarDate model."""

    def test_calendar_date_from_wire_text(self):
        """Test decoding the wire date text."""
        entry = CalendarDate.model_validate(
            {"date": "2024-02-29", "service_id": "B1 MWF"}
        )
        assert entry.date == date(2024, 2, 29)
        assert entry.service_id == "B1 MWF"

    def test_calendar_date_from_date_value(self):
        """Test constructing with a date object directly."""
        entry = CalendarDate(date=date(2023, 12, 25), service_id="HOLIDAY")
        assert entry.date == date(2023, 12, 25)

    @pytest.mark.parametrize(
        "bad_value", ["2023-02-29", "2024/02/29", "20240229", "", 20240229]
    )
    def test_calendar_date_rejects_invalid_text(self, bad_value):
        """Test that invalid date values fail validation instead of defaulting."""
        with pytest.raises(PydanticValidationError):
            CalendarDate.model_validate({"date": bad_value, "service_id": "X"})

    def test_calendar_date_rejects_datetime(self):
        """Test that time-of-day values are rejected."""
        with pytest.raises(PydanticValidationError):
            CalendarDate(date=datetime(2024, 2, 29, 8, 30), service_id="X")

    def test_calendar_date_serializes_as_wire_text(self):
        """Test JSON dump uses the YYYY-MM-DD form."""
        entry = CalendarDate(date=date(2024, 2, 29), service_id="X")
        assert entry.model_dump(mode="json") == {
            "date": "2024-02-29",
            "service_id": "X",
        }

    def test_calendar_dates_response(self, sample_calendar_dates_response):
        """Test calendar dates envelope decoding."""
        response = CalendarDatesResponse.model_validate(
            sample_calendar_dates_response
        )
        assert [d.service_id for d in response.calendar_dates] == [
            "B1 MWF",
            "SN1 NONUI",
        ]
