"""Domain Types — aliases and enums shared by the combinators and the leap-year rule.

Invariants:
    - Predicate[T] is a unary function returning bool, nothing else
    - Year and Divisor wrap int — never float, never bool
    - LeapRule has exactly 4 members; 2 of them denote leap years

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for LeapRule: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import Callable, NewType, TypeVar


T = TypeVar("T")
U = TypeVar("U")
P = TypeVar("P")


# ─── Function Shapes ─────────────────────────────────────────────

Predicate = Callable[[T], bool]
UnaryFunction = Callable[[T], U]
PredicateFactory = Callable[[P], Callable[[T], bool]]


# ─── Value Types ─────────────────────────────────────────────────

Year = NewType("Year", int)          # proleptic Gregorian, any sign
Divisor = NewType("Divisor", int)    # non-zero


# ─── Enums ───────────────────────────────────────────────────────

class LeapRule(str, Enum):
    """The clause of the Gregorian rule that decided a year."""
    DIVISIBLE_BY_400 = "divisible_by_400"
    DIVISIBLE_BY_4_NOT_100 = "divisible_by_4_not_100"
    CENTURY_NOT_400 = "century_not_400"
    NOT_DIVISIBLE_BY_4 = "not_divisible_by_4"

    @property
    def is_leap(self) -> bool:
        return self in (LeapRule.DIVISIBLE_BY_400, LeapRule.DIVISIBLE_BY_4_NOT_100)
