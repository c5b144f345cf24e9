"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the system boundary only; core/ never imports them
    - Domain enums from core/ used for enum fields
"""
