"""
Tests for env_validator/utils/parsing.py

These tests pin the textual rules of each target type descriptor.
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

from env_validator.utils.parsing import (
    EMPTY_INTEGER,
    I8,
    I64,
    INVALID_BOOL,
    INVALID_DIGIT,
    INVALID_FLOAT,
    TOO_LARGE,
    TOO_SMALL,
    U8,
    U16,
    U64,
    parse_value,
    resolve_type_name,
    type_name,
)


@pytest.mark.parametrize(
    "text, target, expected",
    [
        ("0", U16, 0),
        ("65535", U16, 65535),
        ("+42", U16, 42),
        ("007", U8, 7),
        ("-128", I8, -128),
        ("127", I8, 127),
        ("18446744073709551615", U64, 2**64 - 1),
        ("-9223372036854775808", I64, -(2**63)),
        ("123456789012345678901234567890", int, 123456789012345678901234567890),
    ],
)
def test_integer_accepts(text, target, expected):
    assert parse_value(text, target) == expected


@pytest.mark.parametrize(
    "text, target, reason",
    [
        ("", U16, EMPTY_INTEGER),
        ("abc", U16, INVALID_DIGIT),
        (" 8080", U16, INVALID_DIGIT),
        ("8080 ", U16, INVALID_DIGIT),
        ("1_000", U16, INVALID_DIGIT),
        ("1.5", U16, INVALID_DIGIT),
        ("+", U16, INVALID_DIGIT),
        ("-1", U16, INVALID_DIGIT),
        ("-0", U16, INVALID_DIGIT),
        ("65536", U16, TOO_LARGE),
        ("128", I8, TOO_LARGE),
        ("-129", I8, TOO_SMALL),
        ("0x10", int, INVALID_DIGIT),
    ],
)
def test_integer_rejects(text, target, reason):
    with pytest.raises(ValueError) as exc_info:
        parse_value(text, target)

    assert str(exc_info.value) == reason


@pytest.mark.parametrize("text, expected", [("0.75", 0.75), ("1e3", 1000.0), ("-2", -2.0), ("inf", float("inf"))])
def test_float_accepts(text, expected):
    assert parse_value(text, float) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1.0", "1_000.0"])
def test_float_rejects(text):
    with pytest.raises(ValueError, match=INVALID_FLOAT):
        parse_value(text, float)


def test_bool_is_strict():
    assert parse_value("true", bool) is True
    assert parse_value("false", bool) is False

    for text in ("True", "1", "yes", ""):
        with pytest.raises(ValueError) as exc_info:
            parse_value(text, bool)
        assert str(exc_info.value) == INVALID_BOOL


def test_str_is_identity():
    assert parse_value("  spaced  ", str) == "  spaced  "


def test_callable_target():
    assert parse_value("/tmp/app", Path) == Path("/tmp/app")


def test_callable_target_failure_becomes_value_error():
    def port_pair(text):
        low, high = text.split("-")
        return int(low), int(high)

    assert parse_value("8000-8010", port_pair) == (8000, 8010)
    with pytest.raises(ValueError):
        parse_value("8000", port_pair)


def test_unhashable_callable_target():
    """Callable instances that define __eq__ without __hash__ still work."""
    @dataclass
    class Scaled:
        factor: int

        def __call__(self, text):
            return int(text) * self.factor

    assert parse_value("3", Scaled(2)) == 6
    with pytest.raises(ValueError):
        parse_value("three", Scaled(2))


def test_non_callable_target_is_type_error():
    with pytest.raises(TypeError):
        parse_value("1", 42)


def test_type_names():
    assert type_name(U16) == "u16"
    assert type_name(float) == "float"
    assert resolve_type_name("U16") is U16
    assert resolve_type_name("bool") is bool
    assert resolve_type_name("uint") is None
