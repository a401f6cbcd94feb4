from __future__ import annotations

import math

import pytest

from asb_dividend.core.coercion import parse_number, to_period_years


@pytest.mark.parametrize(
    "raw, expected",
    [
        (50000, 50000.0),
        (2.5, 2.5),
        ("1500", 1500.0),
        (" 3.75 ", 3.75),
        ("12abc", 12.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-20", -20.0),
    ],
)
def test_parse_number_reads_numeric_prefix(raw, expected):
    assert parse_number(raw, 7.0) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "0", 0, 0.0, "nan", float("nan"), True, [1], {"a": 1}],
)
def test_parse_number_falls_back(raw):
    assert parse_number(raw, 7.0) == 7.0


def test_period_fallback_is_one_year():
    # a zero horizon is unusable and becomes the form's fallback of one year
    assert to_period_years(parse_number("0", 1.0)) == 1


@pytest.mark.parametrize(
    "value, expected",
    [(1.0, 1), (2.9, 2), (0.5, 0), (-1.5, -1)],
)
def test_to_period_years_truncates(value, expected):
    assert to_period_years(value) == expected


@pytest.mark.parametrize("raw", [math.inf, -math.inf, "1e999", "-1e999", 10**400])
def test_parse_number_rejects_non_finite(raw):
    assert parse_number(raw, 7.0) == 7.0
