"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or repositories/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: validation, tallies and
      ownership rules live here, the shell orchestrates the store around them
"""
