"""CUMTD Transit Client Package

A typed Python client for the Champaign-Urbana Mass Transit District
developer API, with a small CLI for querying stops, routes, shapes and
service calendar dates.
"""

__version__ = "0.1.0"

from .core.client import CumtdClient
from .core.models import CalendarDate, Route, ShapePoint, Stop

__all__ = ["CalendarDate", "CumtdClient", "Route", "ShapePoint", "Stop"]
