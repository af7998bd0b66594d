"""Tokenise request lines such as ``"100 degrees Celsius to K"``.

The grammar is driven by the number of space separated tokens:

* ``<value> <unit> <prep> <unit>`` (4 tokens)
* ``<value> <unit> <unit> <prep> <unit>`` or
  ``<value> <unit> <prep> <unit> <unit>`` (5 tokens, told apart by the
  position of ``to``/``in``)
* ``<value> <unit> <unit> <prep> <unit> <unit>`` (6 tokens)

Anything else is rejected with :class:`~unitconv.errors.RequestParseError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import RequestParseError

__all__ = ["PREPOSITIONS", "ConversionRequest", "parse_request", "parse_value", "tokenize"]

PREPOSITIONS = ("to", "in")

# The only accepted spellings of the non-finite specials.
_SPECIAL_VALUES = ("NaN", "Infinity")


@dataclass(frozen=True)
class ConversionRequest:
    """Magnitude and unit phrases extracted from one input line."""

    value: float
    source: str
    target: str


def tokenize(line: str) -> List[str]:
    """Split on single spaces after trimming, keeping empty tokens."""

    return line.strip().split(" ")


def parse_value(token: str) -> float:
    """Parse a decimal or exponent literal, rejecting digit separators and lowercase specials."""

    if "_" in token:
        raise RequestParseError(token, "digit separators are not allowed")
    word = token.strip().lstrip("+-")
    if word[:3].lower() in ("nan", "inf") and word not in _SPECIAL_VALUES:
        raise RequestParseError(token, "value is not a number")
    try:
        return float(token)
    except ValueError as exc:
        raise RequestParseError(token, "value is not a number") from exc


def _preposition_index(line: str, tokens: Sequence[str]) -> int:
    for preposition in PREPOSITIONS:
        if preposition in tokens:
            return tokens.index(preposition)
    raise RequestParseError(line, "missing 'to' or 'in'")


def parse_request(line: str) -> ConversionRequest:
    """Extract the value and the source/target unit phrases from ``line``."""

    tokens = tokenize(line)
    count = len(tokens)

    if count == 4:
        value = parse_value(tokens[0])
        return ConversionRequest(value, tokens[1], tokens[3])

    if count == 5:
        value = parse_value(tokens[0])
        if _preposition_index(line, tokens) == 3:
            return ConversionRequest(value, f"{tokens[1]} {tokens[2]}", tokens[4])
        return ConversionRequest(value, tokens[1], f"{tokens[3]} {tokens[4]}")

    if count == 6:
        value = parse_value(tokens[0])
        return ConversionRequest(value, f"{tokens[1]} {tokens[2]}", f"{tokens[4]} {tokens[5]}")

    raise RequestParseError(line, f"unexpected number of tokens ({count})")
