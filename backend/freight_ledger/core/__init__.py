"""Core Layer — pure record logic, no IO, no async, no drivers.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (date.today() only as a default)

Design Decisions:
    - Functional core separated from imperative shell: every backend shares it
"""
