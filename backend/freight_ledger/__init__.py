"""Freight Ledger — freight profit records API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
