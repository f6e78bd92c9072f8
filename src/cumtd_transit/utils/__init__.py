"""Utility modules for cumtd-transit."""

from .wire_format import format_decimal, format_wire_date, parse_wire_date

__all__ = [
    "format_decimal",
    "format_wire_date",
    "parse_wire_date",
]
