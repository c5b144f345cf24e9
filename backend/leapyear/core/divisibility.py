"""Divisibility Predicates — curried factories: divisor -> number -> bool.

Invariants:
    - is_divisible_by(d)(n) == (n % d == 0) for every int n, including negatives
    - not_divisible_by(d)(n) == (not is_divisible_by(d)(n))
    - Divisor validated once, when the factory is called — the returned predicate never raises for int input

Design Decisions:
    - not_divisible_by is compose(not_, is_divisible_by), not a hand-written negation:
      compose threads the divisor through is_divisible_by, then not_ negates the resulting predicate
    - Python's % yields 0 exactly for multiples regardless of sign — no abs() guard needed
"""

from leapyear.core.combinators import compose, not_
from leapyear.core.domain_types import Divisor, Predicate, PredicateFactory
from leapyear.core.errors import InvalidDivisorError


def require_divisor(value: object) -> Divisor:
    """Reject bool, non-int and zero divisors."""
    if isinstance(value, bool) or not isinstance(value, int) or value == 0:
        raise InvalidDivisorError(value)
    return Divisor(value)


def is_divisible_by(divisor: int) -> Predicate[int]:
    """Predicate factory: number -> number % divisor == 0.

    >>> is_divisible_by(4)(2024)
    True
    """
    divisor = require_divisor(divisor)

    def divisible(number: int) -> bool:
        return number % divisor == 0

    return divisible


not_divisible_by: PredicateFactory[int, int] = compose(not_, is_divisible_by)
