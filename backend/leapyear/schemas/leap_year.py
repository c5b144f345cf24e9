"""Leap Year Schemas — Pydantic models and parameter types for the leap-year endpoints.

Invariants:
    - LeapYearResponse.days is 365 or 366 and agrees with is_leap_year
    - LeapYearRangeResponse.count == len(leap_years)
    - YearParam accepts only base-10 integer text: "2000.0", "2e3", "0x7d0" fail validation

Design Decisions:
    - BeforeValidator on the raw string: pydantic's lax int mode would coerce "4.0" to 4,
      which the core rejects for floats
"""

import re
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from leapyear.core.domain_types import LeapRule

INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def require_integer_text(value: object) -> object:
    if isinstance(value, str) and not INTEGER_TEXT.fullmatch(value):
        raise ValueError(f"must be an integer, got {value!r}")
    return value


YearParam = Annotated[int, BeforeValidator(require_integer_text)]


class LeapYearResponse(BaseModel):
    """Verdict for a single year."""
    year: int
    is_leap_year: bool
    rule: LeapRule
    days: int = Field(ge=365, le=366)


class LeapYearRangeResponse(BaseModel):
    """Leap years in the half-open range [start, end)."""
    start: int
    end: int
    count: int = Field(ge=0)
    leap_years: list[int]
