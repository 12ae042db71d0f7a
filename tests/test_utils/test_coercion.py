"""
Unit tests for the permissive coercion helpers.
"""

import math
import pytest
from datetime import datetime
from src.utils.coercion import (
    is_blank_or_null,
    parse_bool,
    parse_date,
    parse_float,
    parse_int,
)


@pytest.mark.parametrize("raw,expected", [
    ("42", 42),
    ("  7 reviews", 7),
    ("-3", -3),
    ("+8", 8),
    ("3.9", 3),
    ("0012", 12),
    ("abc", None),
    ("", None),
    (None, None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    ("4.5", 4.5),
    ("3", 3.0),
    (" 2.25 stars", 2.25),
    (".5", 0.5),
    ("-1.5", -1.5),
    ("1e1", 10.0),
    ("4.", 4.0),
    ("n/a", None),
    ("", None),
    (None, None),
])
def test_parse_float(raw, expected):
    assert parse_float(raw) == expected


def test_parse_float_infinity():
    assert parse_float("Infinity") == math.inf
    assert parse_float("-Infinity") == -math.inf


def test_parse_date():
    assert parse_date("2024-03-15") == datetime(2024, 3, 15)
    assert parse_date("2024-03-15 10:30:00") == datetime(2024, 3, 15, 10, 30)
    assert parse_date("not a date") is None
    assert parse_date(None) is None


@pytest.mark.parametrize("raw,expected", [
    ("true", True),
    ("True", True),
    (" TRUE ", True),
    ("false", False),
    ("truthy", False),
    ("", False),
    (None, False),
])
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


@pytest.mark.parametrize("raw,expected", [
    (None, True),
    ("", True),
    ("  ", True),
    ("null", True),
    ("NuLL", True),
    (" null ", True),
    ("nullable", False),
    ("0", False),
    ("x", False),
])
def test_is_blank_or_null(raw, expected):
    assert is_blank_or_null(raw) is expected


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
