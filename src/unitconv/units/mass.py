"""Mass units, converted through the gram."""
from __future__ import annotations

from .base import Unit, UnitDomain, linear_converter

__all__ = ["GRAM", "KILOGRAM", "MASS", "MILLIGRAM", "OUNCE", "POUND"]

GRAM = Unit("G", "Gram", "gram", "grams", ("g", "gram", "grams"), factor=1.0)
KILOGRAM = Unit("KG", "Kilogram", "kilogram", "kilograms", ("kg", "kilogram", "kilograms"), factor=1000.0)
MILLIGRAM = Unit("MG", "Milligram", "milligram", "milligrams", ("mg", "milligram", "milligrams"), factor=0.001)
POUND = Unit("LB", "Pound", "pound", "pounds", ("lb", "pound", "pounds"), factor=453.592)
OUNCE = Unit("OZ", "Ounce", "ounce", "ounces", ("oz", "ounce", "ounces"), factor=28.3495)

MASS = UnitDomain(
    "Mass",
    (GRAM, KILOGRAM, MILLIGRAM, POUND, OUNCE),
    linear_converter,
    negative_message="Weight shouldn't be negative",
)
