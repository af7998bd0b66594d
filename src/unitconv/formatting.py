"""Render conversion results and error replies."""
from __future__ import annotations

from .units.base import Unit

__all__ = [
    "PARSE_ERROR",
    "UNKNOWN",
    "format_impossible",
    "format_number",
    "format_quantity",
    "format_result",
    "unit_word",
]

PARSE_ERROR = "Parse error"
UNKNOWN = "???"


def format_number(value: float) -> str:
    """Shortest representation that round-trips, always with a decimal part."""

    return repr(float(value))


def unit_word(value: float, unit: Unit) -> str:
    return unit.singular if value == 1.0 else unit.plural


def format_quantity(value: float, unit: Unit) -> str:
    return f"{format_number(value)} {unit_word(value, unit)}"


def format_result(value: float, source: Unit, result: float, target: Unit) -> str:
    return f"{format_quantity(value, source)} is {format_quantity(result, target)}"


def format_impossible(source: str, target: str) -> str:
    return f"Conversion from {source} to {target} is impossible"
