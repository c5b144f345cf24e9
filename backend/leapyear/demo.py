"""Demo — prints the leap-year verdict for illustrative years.

Usage:
    python -m leapyear.demo            # settings.demo_years
    python -m leapyear.demo 1600 1700  # explicit years

Invariants:
    - One line per year, "<year>: <True|False>", in argument order
    - Non-integer arguments rejected by argparse (exit code 2) before core/ runs
"""

import argparse
import logging
import sys

from leapyear.config import get_settings
from leapyear.core.leap_year import is_leap_year
from leapyear.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leapyear-demo",
        description="Print whether each year is a Gregorian leap year.",
    )
    parser.add_argument(
        "years", nargs="*", type=int, metavar="YEAR",
        help="years to check (default: configured demo years)",
    )
    return parser


def format_verdict(year: int) -> str:
    return f"{year}: {is_leap_year(year)}"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    years = args.years or settings.demo_years
    logger.debug(f"Checking {len(years)} year(s)")
    for year in years:
        print(format_verdict(year))
    return 0


if __name__ == "__main__":
    sys.exit(main())
