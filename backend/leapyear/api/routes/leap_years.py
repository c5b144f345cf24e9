"""Leap Year Routes — single-year verdicts and range listings.

Invariants:
    - GET /api/v1/leap-years/{year} answers with is_leap_year, the deciding rule, and day count
    - GET /api/v1/leap-years?start=&end= lists leap years in [start, end)
    - Range span bounded by settings.max_range_span
    - LeapYearError raised by core/ reaches the global handler untouched

Design Decisions:
    - Year and bounds typed YearParam: anything but integer text (floats included) fails as
      VALIDATION_ERROR before core/ runs
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query

from leapyear.config import get_settings
from leapyear.core.leap_year import (
    classify_year, days_in_year, is_leap_year, leap_years_between,
)
from leapyear.schemas.leap_year import (
    LeapYearRangeResponse, LeapYearResponse, YearParam,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/leap-years", tags=["leap-years"])


@router.get("", response_model=LeapYearRangeResponse)
async def list_leap_years(
    start: Annotated[YearParam, Query()],
    end: Annotated[YearParam, Query()],
):
    """Leap years in the half-open range [start, end)."""
    years = leap_years_between(
        start, end, max_span=get_settings().max_range_span,
    )
    logger.info(
        f"Listed {len(years)} leap years",
        extra={"start": start, "end": end},
    )
    return LeapYearRangeResponse(
        start=start, end=end, count=len(years), leap_years=years,
    )


@router.get("/{year}", response_model=LeapYearResponse)
async def get_leap_year(year: Annotated[YearParam, Path()]):
    """Leap-year verdict for one year."""
    leap = is_leap_year(year)
    logger.info(f"Checked year: leap={leap}", extra={"year": year})
    return LeapYearResponse(
        year=year,
        is_leap_year=leap,
        rule=classify_year(year),
        days=days_in_year(year),
    )
