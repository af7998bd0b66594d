import pytest

from unitconv.errors import RequestParseError
from unitconv.request import ConversionRequest, parse_request, parse_value, tokenize


@pytest.mark.parametrize(
    "line, expected",
    [
        ("100 C to F", ConversionRequest(100.0, "C", "F")),
        ("  0 C in K  ", ConversionRequest(0.0, "C", "K")),
        ("1 m whatever ft", ConversionRequest(1.0, "m", "ft")),
        ("1 degree Celsius to K", ConversionRequest(1.0, "degree Celsius", "K")),
        ("1 K to degrees Fahrenheit", ConversionRequest(1.0, "K", "degrees Fahrenheit")),
        ("1 K in degrees Fahrenheit", ConversionRequest(1.0, "K", "degrees Fahrenheit")),
        ("3 degrees Celsius in degrees Fahrenheit", ConversionRequest(3.0, "degrees Celsius", "degrees Fahrenheit")),
        ("-2.5 kg to lb", ConversionRequest(-2.5, "kg", "lb")),
        ("1e3 g to kg", ConversionRequest(1000.0, "g", "kg")),
    ],
)
def test_parse_request(line, expected) -> None:
    assert parse_request(line) == expected


def test_to_takes_priority_over_in() -> None:
    # "to" sits at index 3, so the first two words after the value form the source.
    assert parse_request("1 in in to m") == ConversionRequest(1.0, "in in", "m")


def test_repeated_spaces_produce_empty_tokens() -> None:
    assert tokenize("100  C to F") == ["100", "", "C", "to", "F"]
    assert parse_request("100  C to F") == ConversionRequest(100.0, " C", "F")


@pytest.mark.parametrize(
    "line",
    [
        "banana",
        "",
        "5 C",
        "5 C to",
        "5 C to F now please ok",
        "abc C to F",
        "1 degree Celsius into K",
        "1 degree Celsius To K",
        "x degrees Celsius to degrees Fahrenheit",
    ],
)
def test_parse_request_rejects(line) -> None:
    with pytest.raises(RequestParseError):
        parse_request(line)


def test_parse_value() -> None:
    assert parse_value("-0.5") == -0.5
    with pytest.raises(RequestParseError) as excinfo:
        parse_value("ten")
    assert excinfo.value.text == "ten"


@pytest.mark.parametrize("token", ["1_000", "nan", "inf", "infinity", "-inf", "NAN"])
def test_parse_value_rejects_separators_and_lowercase_specials(token) -> None:
    with pytest.raises(RequestParseError):
        parse_value(token)


def test_parse_value_accepts_exact_special_spellings() -> None:
    assert parse_value("Infinity") == float("inf")
    assert parse_value("-Infinity") == float("-inf")
    assert parse_value("NaN") != parse_value("NaN")
    assert parse_value("1e999") == float("inf")
