"""Leap Year — proleptic Gregorian rule assembled point-free from the combinators.

Invariants:
    - is_leap_year(y) == (y % 4 == 0 and y % 100 != 0) or y % 400 == 0 for every int y
    - Year 0 and negative years follow the same arithmetic (year 0 is leap)
    - Non-int input (bool and integral floats included) raises InvalidYearError
    - classify_year(y).is_leap == is_leap_year(y)
    - leap_years_between covers the half-open range [start, end), ascending

Design Decisions:
    - Rule built once at import time; calls only evaluate nested predicates
    - is_leap_year = compose(rule, require_year): validation is just the first stage of the pipeline
    - max_span is a parameter, not read from settings (core does not import config)
"""

from leapyear.core.combinators import and_, compose, or_
from leapyear.core.divisibility import is_divisible_by, not_divisible_by
from leapyear.core.domain_types import LeapRule, Year
from leapyear.core.errors import InvalidRangeError, RangeTooLargeError, InvalidYearError


DAYS_IN_COMMON_YEAR: int = 365
DAYS_IN_LEAP_YEAR: int = 366


def require_year(value: object) -> Year:
    """Reject anything that is not a plain int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidYearError(value)
    return Year(value)


_divisible_by_4 = is_divisible_by(4)
_divisible_by_100 = is_divisible_by(100)
_divisible_by_400 = is_divisible_by(400)

gregorian_rule = or_(
    and_(_divisible_by_4, not_divisible_by(100)),
    _divisible_by_400,
)

is_leap_year = compose(gregorian_rule, require_year)


def classify_year(year: int) -> LeapRule:
    """Name the clause of the Gregorian rule that decides `year`."""
    year = require_year(year)
    if _divisible_by_400(year):
        return LeapRule.DIVISIBLE_BY_400
    if _divisible_by_100(year):
        return LeapRule.CENTURY_NOT_400
    if _divisible_by_4(year):
        return LeapRule.DIVISIBLE_BY_4_NOT_100
    return LeapRule.NOT_DIVISIBLE_BY_4


def days_in_year(year: int) -> int:
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_COMMON_YEAR


def leap_years_between(
    start: int, end: int, max_span: int | None = None,
) -> list[int]:
    """Leap years in [start, end). Raises on a reversed or oversized range."""
    start = require_year(start)
    end = require_year(end)
    if end < start:
        raise InvalidRangeError(start, end)
    span = end - start
    if max_span is not None and span > max_span:
        raise RangeTooLargeError(span, max_span)
    return [year for year in range(start, end) if gregorian_rule(year)]
