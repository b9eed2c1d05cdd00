"""ORM Models — SQLAlchemy declarative models for the SQL record backend.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from freight_ledger.models.record import Record  # noqa: F401
