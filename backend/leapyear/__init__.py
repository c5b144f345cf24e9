"""Leapyear Application Package — point-free combinators and a Gregorian leap-year predicate.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
