"""Combinators — right-to-left composition and boolean algebra over unary predicates.

Invariants:
    - compose(f, g)(x) == f(g(x)); compose() is identity; compose(f) behaves as f
    - and_() is vacuously True, or_() is vacuously False (fold identities)
    - and_/or_ evaluate left to right and short-circuit
    - Predicate results are coerced to bool
    - Nothing here catches: a constituent's exception reaches the caller unchanged

Design Decisions:
    - Trailing underscore on and_/or_/not_: the bare names are Python keywords
    - Variadic *args over a sequence parameter: reads like the boolean expression it builds
"""

from leapyear.core.domain_types import Predicate, T, UnaryFunction


def identity(value: T) -> T:
    return value


def compose(*fns: UnaryFunction) -> UnaryFunction:
    """Compose unary functions right to left.

    >>> compose(str, lambda i: i + 1)(0)
    '1'
    """
    if not fns:
        return identity
    if len(fns) == 1:
        return fns[0]

    def composed(value):
        for fn in reversed(fns):
            value = fn(value)
        return value

    return composed


def not_(predicate: Predicate[T]) -> Predicate[T]:
    """Logical NOT of a predicate.

    >>> not_(lambda x: x > 0)(-1)
    True
    """
    def negated(value: T) -> bool:
        return not predicate(value)

    return negated


def and_(*predicates: Predicate[T]) -> Predicate[T]:
    """True iff every predicate holds. Stops at the first False.

    >>> and_(lambda x: x > 0, lambda x: x % 2 == 0)(4)
    True
    """
    def conjunction(value: T) -> bool:
        return all(predicate(value) for predicate in predicates)

    return conjunction


def or_(*predicates: Predicate[T]) -> Predicate[T]:
    """True iff at least one predicate holds. Stops at the first True.

    >>> or_(lambda x: x < 0, lambda x: x == 0)(0)
    True
    """
    def disjunction(value: T) -> bool:
        return any(predicate(value) for predicate in predicates)

    return disjunction
