"""Record ORM — one freight transaction row in the single-table SQL layout.

Invariants:
    - id is an integer identity assigned by the database
    - date is the ISO calendar date string, indexed for month/range queries
    - numeric columns are nullable: NaN input is stored as NULL

Design Decisions:
    - Single table keyed by identity: month grouping is a query, not a physical partition
    - Column names are snake_case; to_dict() maps back to the API field names
      (timestamps included as createdAt/updatedAt)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Float, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from freight_ledger.db.base import Base

# API field name → ORM attribute name
FIELD_COLUMNS = {
    "date": "date",
    "vehicleNumber": "vehicle_number",
    "city": "city",
    "destination": "destination",
    "weightInTons": "weight_in_tons",
    "ratePerTon": "rate_per_ton",
    "amountSpend": "amount_spend",
    "rateWeFixed": "rate_we_fixed",
    "extraSpend": "extra_spend",
    "totalProfit": "total_profit",
}


class Record(Base):
    """Freight transaction row."""
    __tablename__ = "records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str | None] = mapped_column(String(32), index=True, nullable=True)
    vehicle_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    city: Mapped[str | None] = mapped_column(String(128), nullable=True)
    destination: Mapped[str | None] = mapped_column(String(128), nullable=True)
    weight_in_tons: Mapped[float | None] = mapped_column(Float, nullable=True)
    rate_per_ton: Mapped[float | None] = mapped_column(Float, nullable=True)
    amount_spend: Mapped[float | None] = mapped_column(Float, nullable=True)
    rate_we_fixed: Mapped[float | None] = mapped_column(Float, nullable=True)
    extra_spend: Mapped[float | None] = mapped_column(Float, nullable=True)
    total_profit: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def apply(self, fields: dict) -> None:
        """Copy API-named fields onto the row."""
        for name, column in FIELD_COLUMNS.items():
            setattr(self, column, fields.get(name))

    def to_dict(self) -> dict:
        record = {"id": self.id}
        for name, column in FIELD_COLUMNS.items():
            record[name] = getattr(self, column)
        record["createdAt"] = self.created_at
        record["updatedAt"] = self.updated_at
        return record
