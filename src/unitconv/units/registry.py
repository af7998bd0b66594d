"""Cross-domain lookups over the built-in unit tables."""
from __future__ import annotations

from typing import Optional, Tuple

from .base import UnitDomain
from .length import LENGTH
from .mass import MASS
from .temperature import TEMPERATURE

__all__ = ["DOMAINS", "find_domain", "get_domain", "is_known_unit"]

# Lookup order when a phrase is resolved without a domain hint.
DOMAINS: Tuple[UnitDomain, ...] = (TEMPERATURE, MASS, LENGTH)


def find_domain(text: str) -> Optional[UnitDomain]:
    """Return the first domain where ``text`` is an alias, if any."""

    for domain in DOMAINS:
        if domain.is_member(text):
            return domain
    return None


def is_known_unit(text: str) -> bool:
    return find_domain(text) is not None


def get_domain(name: str) -> UnitDomain:
    for domain in DOMAINS:
        if domain.name.lower() == name.lower():
            return domain
    raise KeyError(f"Unknown domain: {name!r}")
