"""Record Schemas — request and response shapes for /api/records.

Invariants:
    - RecordPayload never rejects a numeric field: non-numeric input becomes NaN
    - Absent fields stay None so backends can tell "missing" from "NaN"
    - RecordOut serializes NaN/Infinity as null (JSON has no NaN)
    - Field names are the camelCase names the dashboard sends
    - createdAt/updatedAt are set by the Mongo and SQL backends; CSV rows carry none
    - id is null only for a hand-edited CSV row with no usable id

Design Decisions:
    - field_validator(mode="before") for coercion: reuses core.record_fields.to_number
"""

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from freight_ledger.core.record_fields import NUMERIC_FIELDS, STRING_FIELDS, to_number


class RecordPayload(BaseModel):
    """Body of POST /api/records and PUT /api/records/{id}."""
    model_config = ConfigDict(extra="ignore")

    date: str | None = None
    vehicleNumber: str | None = None
    city: str | None = None
    destination: str | None = None
    weightInTons: float | None = None
    ratePerTon: float | None = None
    amountSpend: float | None = None
    rateWeFixed: float | None = None
    extraSpend: float | None = None
    totalProfit: float | None = None

    @field_validator(*STRING_FIELDS, mode="before")
    @classmethod
    def stringify(cls, v: Any) -> str | None:
        return None if v is None else str(v)

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> float | None:
        return None if v is None else to_number(v)


class RecordOut(BaseModel):
    """A stored record as returned by every backend."""
    id: int | str | None
    date: str | None = None
    vehicleNumber: str | None = None
    city: str | None = None
    destination: str | None = None
    weightInTons: float | None = None
    ratePerTon: float | None = None
    amountSpend: float | None = None
    rateWeFixed: float | None = None
    extraSpend: float | None = None
    totalProfit: float | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    @field_serializer(*NUMERIC_FIELDS)
    def finite_or_null(self, v: float | None) -> float | None:
        if v is None or not math.isfinite(v):
            return None
        return v


class MonthlyTotals(BaseModel):
    month: str
    loads: int
    profit: float


class RecordSummary(BaseModel):
    """Dashboard headline numbers for the selected window."""
    totalProfit: float
    totalInvestment: float
    totalExtraSpend: float
    totalLoads: int
    monthly: list[MonthlyTotals]


class DeleteResponse(BaseModel):
    message: str = "Record deleted successfully"
