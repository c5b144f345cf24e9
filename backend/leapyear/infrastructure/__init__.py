"""Infrastructure Layer — process-level concerns (logging) kept out of core/.

Invariants:
    - core/ never imports from here
"""
