import pytest

from unitconv.formatting import format_impossible, format_number, format_quantity, format_result, unit_word
from unitconv.units.length import FOOT, METER
from unitconv.units.temperature import CELSIUS, KELVIN


@pytest.mark.parametrize(
    "value, expected",
    [
        (100, "100.0"),
        (273.15, "273.15"),
        (-40.0, "-40.0"),
        (0.0254, "0.0254"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "foot"),
        (2.0, "feet"),
        (0.0, "feet"),
        (0.5, "feet"),
        (-1.0, "feet"),
    ],
)
def test_unit_word(value, expected) -> None:
    assert unit_word(value, FOOT) == expected


def test_format_quantity() -> None:
    assert format_quantity(1.0, KELVIN) == "1.0 Kelvin"
    assert format_quantity(3.0, KELVIN) == "3.0 Kelvins"


def test_pluralization_is_independent_per_side() -> None:
    assert format_result(1.0, METER, 2.0, FOOT) == "1.0 meter is 2.0 feet"
    assert format_result(2.0, CELSIUS, 1.0, KELVIN) == "2.0 degrees Celsius is 1.0 Kelvin"


def test_format_impossible() -> None:
    assert format_impossible("???", "meters") == "Conversion from ??? to meters is impossible"
