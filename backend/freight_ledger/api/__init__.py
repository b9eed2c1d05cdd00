"""API Layer — FastAPI routes, auth guard and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; failures use the {"error", "code"} envelope

Design Decisions:
    - Thin routes delegate to RecordStore and pure core helpers
"""
