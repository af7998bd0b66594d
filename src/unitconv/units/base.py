"""Unit and domain primitives shared by the per-domain registries."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..errors import UnknownUnitError

__all__ = ["Converter", "Unit", "UnitDomain", "linear_converter"]


@dataclass(frozen=True)
class Unit:
    """Measurement unit belonging to a single domain."""

    key: str
    name: str
    singular: str
    plural: str
    aliases: Tuple[str, ...]
    factor: Optional[float] = None

    def __str__(self) -> str:
        return self.name


Converter = Callable[[float, Unit, Unit], float]


def _fold(text: str) -> str:
    return text.lower()


def linear_converter(value: float, source: Unit, target: Unit) -> float:
    """Convert through the domain's base unit using each unit's ``factor``."""

    if source.factor is None or target.factor is None:
        raise ValueError(f"Units {source.key!r} and {target.key!r} lack a base multiplier")
    return (value * source.factor) / target.factor


class UnitDomain:
    """Read-only table of units with case-insensitive alias resolution.

    Parameters
    ----------
    name:
        Human readable domain name (``"Temperature"``, ``"Length"``...).
    units:
        Units of the domain, in display order.
    converter:
        Function computing ``value`` expressed in ``source`` as ``target``.
    negative_message:
        Reply used when a negative magnitude is requested. ``None`` means the
        domain accepts negative values.
    """

    def __init__(
        self,
        name: str,
        units: Sequence[Unit],
        converter: Converter,
        *,
        negative_message: Optional[str] = None,
    ) -> None:
        self.name = name
        self.units: Tuple[Unit, ...] = tuple(units)
        self.negative_message = negative_message
        self._converter = converter

        lookup: dict[str, Unit] = {}
        for unit in self.units:
            for alias in unit.aliases:
                folded = _fold(alias)
                owner = lookup.get(folded)
                if owner is not None and owner is not unit:
                    raise ValueError(
                        f"Alias {alias!r} is shared by {owner.key} and {unit.key} in {name}"
                    )
                lookup[folded] = unit
        self._lookup: Mapping[str, Unit] = MappingProxyType(lookup)

    def __repr__(self) -> str:
        return f"UnitDomain({self.name!r}, units={[unit.key for unit in self.units]})"

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def aliases_of(self, unit: Unit) -> List[str]:
        return list(unit.aliases)

    def parse(self, text: str) -> Unit:
        """Return the unit whose alias matches ``text`` ignoring case."""

        unit = self._lookup.get(_fold(text))
        if unit is None:
            raise UnknownUnitError(text, self.name)
        return unit

    def is_member(self, text: str) -> bool:
        return _fold(text) in self._lookup

    def convert(self, value: float, source: Unit, target: Unit) -> float:
        if source == target:
            return value
        return self._converter(value, source, target)

    def singular(self, unit: Unit) -> str:
        return unit.singular

    def plural(self, unit: Unit) -> str:
        return unit.plural

    def check_value(self, value: float) -> Optional[str]:
        """Return the rejection message for ``value`` or ``None`` when acceptable."""

        if self.negative_message is not None and value < 0.0:
            return self.negative_message
        return None
