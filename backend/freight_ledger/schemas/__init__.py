"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Record numeric fields coerce instead of rejecting (NaN passes through)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
