"""Service Layer — imperative shell around core: limits and logging.

Invariants:
    - Services never re-implement core logic; they only guard and observe it
"""
