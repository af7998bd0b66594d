"""Length units, converted through the meter."""
from __future__ import annotations

from .base import Unit, UnitDomain, linear_converter

__all__ = [
    "CENTIMETER",
    "FOOT",
    "INCH",
    "KILOMETER",
    "LENGTH",
    "METER",
    "MILE",
    "MILLIMETER",
    "YARD",
]

METER = Unit("M", "Meter", "meter", "meters", ("m", "meter", "meters"), factor=1.0)
KILOMETER = Unit("KM", "Kilometer", "kilometer", "kilometers", ("km", "kilometer", "kilometers"), factor=1000.0)
CENTIMETER = Unit("CM", "Centimeter", "centimeter", "centimeters", ("cm", "centimeter", "centimeters"), factor=0.01)
MILLIMETER = Unit("MM", "Millimeter", "millimeter", "millimeters", ("mm", "millimeter", "millimeters"), factor=0.001)
MILE = Unit("MI", "Mile", "mile", "miles", ("mi", "mile", "miles"), factor=1609.35)
YARD = Unit("YD", "Yard", "yard", "yards", ("yd", "yard", "yards"), factor=0.9144)
FOOT = Unit("FT", "Foot", "foot", "feet", ("ft", "foot", "feet"), factor=0.3048)
INCH = Unit("IN", "Inch", "inch", "inches", ("in", "inch", "inches"), factor=0.0254)

LENGTH = UnitDomain(
    "Length",
    (METER, KILOMETER, CENTIMETER, MILLIMETER, MILE, YARD, FOOT, INCH),
    linear_converter,
    negative_message="Length shouldn't be negative",
)
