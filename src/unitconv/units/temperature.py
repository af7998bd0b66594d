"""Temperature scales: Celsius, Fahrenheit and Kelvin."""
from __future__ import annotations

from typing import Callable, Dict, Tuple

from .base import Unit, UnitDomain

__all__ = ["CELSIUS", "FAHRENHEIT", "KELVIN", "TEMPERATURE", "convert_temperature"]

CELSIUS = Unit(
    key="C",
    name="Celsius",
    singular="degree Celsius",
    plural="degrees Celsius",
    aliases=("degree Celsius", "degrees Celsius", "celsius", "dc", "c", "C"),
)
FAHRENHEIT = Unit(
    key="F",
    name="Fahrenheit",
    singular="degree Fahrenheit",
    plural="degrees Fahrenheit",
    aliases=("degree Fahrenheit", "degrees Fahrenheit", "fahrenheit", "df", "f", "F"),
)
KELVIN = Unit(
    key="K",
    name="Kelvin",
    singular="Kelvin",
    plural="Kelvins",
    aliases=("Kelvin", "Kelvins", "k", "K"),
)

# Scales are offset from each other, so every pair has its own formula.
_FORMULAS: Dict[Tuple[str, str], Callable[[float], float]] = {
    ("C", "F"): lambda value: 9.0 / 5.0 * value + 32.0,
    ("C", "K"): lambda value: value + 273.15,
    ("F", "C"): lambda value: 5.0 / 9.0 * (value - 32),
    ("F", "K"): lambda value: 5.0 / 9.0 * (value + 459.67),
    ("K", "C"): lambda value: value - 273.15,
    ("K", "F"): lambda value: 9.0 / 5.0 * value - 459.67,
}


def convert_temperature(value: float, source: Unit, target: Unit) -> float:
    formula = _FORMULAS.get((source.key, target.key))
    if formula is None:
        return value
    return formula(value)


TEMPERATURE = UnitDomain("Temperature", (CELSIUS, FAHRENHEIT, KELVIN), convert_temperature)
