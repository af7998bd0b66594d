"""Unit registries for the supported measurement domains."""

from .base import Unit, UnitDomain, linear_converter
from .length import LENGTH
from .mass import MASS
from .registry import DOMAINS, find_domain, get_domain, is_known_unit
from .temperature import TEMPERATURE

__all__ = [
    "DOMAINS",
    "LENGTH",
    "MASS",
    "TEMPERATURE",
    "Unit",
    "UnitDomain",
    "find_domain",
    "get_domain",
    "is_known_unit",
    "linear_converter",
]
