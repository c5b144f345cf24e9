"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic
    - Predicates are built once at import time and never mutated

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
