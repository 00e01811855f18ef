from __future__ import annotations

import math
import pathlib
import sys

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))

from engine.coercion import coerce_numeric, is_numeric, parse_number


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("10", 10.0),
        (" 7.25 ", 7.25),
        ("-3", -3.0),
        ("1e3", 1000.0),
        (42, 42.0),
        (0.5, 0.5),
        ("", 0.0),
        ("   ", 0.0),
        ("bad", 0.0),
        ("10abc", 10.0),
        ("45%", 45.0),
        ("12.5 kg", 12.5),
        (".5x", 0.5),
        ("abc10", 0.0),
        ("-", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        (math.inf, 0.0),
    ],
)
def test_coerce_numeric_policy(raw, expected):
    assert coerce_numeric(raw) == expected


def test_is_numeric_requires_finite_values():
    assert is_numeric("3.14")
    assert is_numeric(0)
    assert not is_numeric("")
    assert not is_numeric("-inf")
    assert not is_numeric("Jan")


def test_parse_number_distinguishes_zero_from_invalid():
    assert parse_number("0") == 0.0
    assert parse_number("zero") is None


def test_parse_number_reads_leading_number_only():
    assert parse_number("  -2.5e2 units") == -250.0
    assert parse_number("3.") == 3.0
    assert parse_number("1e") == 1.0
    assert parse_number("1e999") is None
    assert not is_numeric("$5")
