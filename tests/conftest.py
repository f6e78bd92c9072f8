"""Test configuration and fixtures."""

import pytest


@pytest.fixture
def api_key():
    """Dummy developer API key."""
    return "test-key-123"


@pytest.fixture
def sample_stops_response():
    """Sample getstopsbylatlon response with two parent locations."""
    return {
        "time": "2024-02-29T10:15:00-06:00",
        "changeset_id": "",
        "new_changeset": True,
        "status": {"code": 200, "msg": "ok"},
        "rqst": {"method": "GetStopsByLatLon", "params": {}},
        "stops": [
            {
                "stop_id": "IT",
                "stop_name": "Illinois Terminal",
                "code": "MTD3121",
                "distance": 120.5,
                "stop_points": [
                    {
                        "code": "MTD3121",
                        "stop_id": "IT:1",
                        "stop_lat": 40.115935,
                        "stop_lon": -88.240947,
                        "stop_name": "Illinois Terminal (Platform A)",
                    },
                    {
                        "code": "MTD3121",
                        "stop_id": "IT:2",
                        "stop_lat": 40.116053,
                        "stop_lon": -88.240863,
                        "stop_name": "Illinois Terminal (Platform B)",
                    },
                ],
            },
            {
                "stop_id": "PLAZA",
                "stop_name": "Transit Plaza",
                "code": "MTD2050",
                "distance": 980.0,
                "stop_points": [
                    {
                        "code": "MTD2050",
                        "stop_id": "PLAZA:1",
                        "stop_lat": 40.108433,
                        "stop_lon": -88.228741,
                        "stop_name": "Transit Plaza (Lane 1)",
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_route_data():
    """A single route record as sent by the service."""
    return {
        "route_id": "1",
        "route_short_name": "1",
        "route_long_name": "One",
        "route_color": "FF0000",
        "route_text_color": "FFFFFF",
    }


@pytest.fixture
def sample_shapes_response():
    """Sample getshapebetweenstops response."""
    return {
        "status": {"code": 200, "msg": "ok"},
        "shapes": [
            {
                "shape_dist_traveled": 0.0,
                "shape_pt_lat": 40.115935,
                "shape_pt_lon": -88.240947,
                "shape_pt_sequence": 3,
                "stop_id": "IT:1",
            },
            {
                "shape_dist_traveled": 312.4,
                "shape_pt_lat": 40.114,
                "shape_pt_lon": -88.238,
                "shape_pt_sequence": 7,
            },
            {
                "shape_dist_traveled": 1504.9,
                "shape_pt_lat": 40.108433,
                "shape_pt_lon": -88.228741,
                "shape_pt_sequence": 12,
                "stop_id": "PLAZA:1",
            },
        ],
    }


@pytest.fixture
def sample_calendar_dates_response():
    """Sample getcalendardatesbydate response."""
    return {
        "status": {"code": 200, "msg": "ok"},
        "calendar_dates": [
            {"date": "2024-02-29", "service_id": "B1 MWF"},
            {"date": "2024-02-29", "service_id": "SN1 NONUI"},
        ],
    }
