"""Leap Year — tests for the point-free Gregorian rule and its companions.

Tests cover:
    - is_leap_year agrees with the arithmetic rule over a wide range, negatives and 0 included
    - canonical years: 2000, 1900, 2024, 2023
    - non-int input rejected with InvalidYearError
    - classify_year agrees with is_leap_year and names the deciding clause
    - days_in_year, leap_years_between (half-open, bounded)
"""

import pytest

from leapyear.core.domain_types import LeapRule
from leapyear.core.errors import (
    InvalidRangeError, InvalidYearError, RangeTooLargeError,
)
from leapyear.core.leap_year import (
    DAYS_IN_COMMON_YEAR,
    DAYS_IN_LEAP_YEAR,
    classify_year,
    days_in_year,
    gregorian_rule,
    is_leap_year,
    leap_years_between,
    require_year,
)


def arithmetic_rule(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


# ─── is_leap_year ────────────────────────────────────────────────

def test_is_leap_year_matches_arithmetic_rule():
    mismatches = [
        year for year in range(-2400, 2801)
        if is_leap_year(year) != arithmetic_rule(year)
    ]
    assert mismatches == []


@pytest.mark.parametrize("year, expected", [
    (2000, True),    # divisible by 400
    (1900, False),   # century, not 400
    (2024, True),    # divisible by 4, not 100
    (2023, False),   # not divisible by 4
    (1600, True),
    (2100, False),
    (0, True),
    (-4, True),
    (-100, False),
    (-400, True),
    (-1, False),
])
def test_is_leap_year_known_years(year, expected):
    assert is_leap_year(year) is expected


def test_is_leap_year_handles_huge_years():
    assert is_leap_year(4 * 10**20 + 4) is True
    assert is_leap_year(10**20) is True
    assert is_leap_year(10**20 + 100) is False


@pytest.mark.parametrize("value", [2000.0, "2000", None, True, False, [2000]])
def test_is_leap_year_rejects_non_int(value):
    with pytest.raises(InvalidYearError) as exc_info:
        is_leap_year(value)
    assert exc_info.value.code == "INVALID_YEAR"
    assert exc_info.value.context.value == value


def test_gregorian_rule_skips_validation():
    assert gregorian_rule(2000) is True
    assert gregorian_rule(1900) is False


def test_require_year_returns_int_unchanged():
    assert require_year(1999) == 1999


# ─── classify_year ───────────────────────────────────────────────

@pytest.mark.parametrize("year, rule", [
    (2000, LeapRule.DIVISIBLE_BY_400),
    (2024, LeapRule.DIVISIBLE_BY_4_NOT_100),
    (1900, LeapRule.CENTURY_NOT_400),
    (2023, LeapRule.NOT_DIVISIBLE_BY_4),
    (0, LeapRule.DIVISIBLE_BY_400),
    (-300, LeapRule.CENTURY_NOT_400),
])
def test_classify_year_names_deciding_clause(year, rule):
    assert classify_year(year) == rule


def test_classify_year_agrees_with_is_leap_year():
    assert all(
        classify_year(year).is_leap == is_leap_year(year)
        for year in range(-800, 801)
    )


def test_leap_rule_has_two_leap_members():
    assert {rule for rule in LeapRule if rule.is_leap} == {
        LeapRule.DIVISIBLE_BY_400,
        LeapRule.DIVISIBLE_BY_4_NOT_100,
    }


def test_classify_year_rejects_non_int():
    with pytest.raises(InvalidYearError):
        classify_year("1900")


# ─── days_in_year ────────────────────────────────────────────────

def test_days_in_year():
    assert days_in_year(2024) == DAYS_IN_LEAP_YEAR == 366
    assert days_in_year(1900) == DAYS_IN_COMMON_YEAR == 365


# ─── leap_years_between ──────────────────────────────────────────

def test_leap_years_between_is_half_open():
    assert leap_years_between(1896, 1912) == [1896, 1904, 1908]


def test_leap_years_between_skips_non_400_centuries():
    assert 1900 not in leap_years_between(1890, 1910)
    assert 2000 in leap_years_between(1990, 2010)


def test_leap_years_between_empty_range():
    assert leap_years_between(2024, 2024) == []


def test_leap_years_between_counts_97_per_400_years():
    assert len(leap_years_between(1600, 2000)) == 97


def test_leap_years_between_rejects_reversed_range():
    with pytest.raises(InvalidRangeError) as exc_info:
        leap_years_between(2024, 2000)
    assert exc_info.value.code == "INVALID_RANGE"
    assert exc_info.value.context.debug_info == {"start": 2024, "end": 2000}


def test_leap_years_between_enforces_max_span():
    assert len(leap_years_between(0, 100, max_span=100)) == 25
    with pytest.raises(RangeTooLargeError) as exc_info:
        leap_years_between(0, 101, max_span=100)
    assert exc_info.value.span == 101
    assert exc_info.value.max_span == 100


def test_leap_years_between_rejects_non_int_bounds():
    with pytest.raises(InvalidYearError):
        leap_years_between(2000.0, 2010)
