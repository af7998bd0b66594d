"""Exceptions raised by the unit registries and the request parser."""
from __future__ import annotations

__all__ = ["RequestParseError", "UnitConverterError", "UnknownUnitError"]


class UnitConverterError(ValueError):
    """Base class for every recoverable conversion failure."""


class UnknownUnitError(UnitConverterError):
    """Raised when a unit phrase is not an alias of the queried domain."""

    def __init__(self, text: str, domain: str) -> None:
        super().__init__(f"{text!r} is not a {domain.lower()} unit")
        self.text = text
        self.domain = domain


class RequestParseError(UnitConverterError):
    """Raised when a request line or value does not follow the accepted grammar."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason
