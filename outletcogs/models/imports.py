"""Record ingestion models."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from outletcogs.models.common import clean_outlet_name


class RevenueRow(BaseModel):
    """An already-parsed revenue row keyed by outlet name."""

    outlet_name: str = Field(..., min_length=1)
    record_date: date
    category: Optional[str] = None
    amount: float = Field(..., ge=0)
    notes: Optional[str] = None

    @field_validator("outlet_name")
    @classmethod
    def strip_outlet_name(cls, value: str) -> str:
        return clean_outlet_name(value)


class ProcurementRow(BaseModel):
    """An already-parsed procurement row keyed by outlet name."""

    outlet_name: str = Field(..., min_length=1)
    record_date: date
    item_category: Optional[str] = None
    item_description: Optional[str] = None
    quantity: float = Field(default=1.0, ge=0)
    unit_cost: float = Field(default=0.0, ge=0)
    total_cost: Optional[float] = Field(default=None, ge=0, description="Defaults to quantity * unit_cost")
    notes: Optional[str] = None

    @field_validator("outlet_name")
    @classmethod
    def strip_outlet_name(cls, value: str) -> str:
        return clean_outlet_name(value)


class ColumnMapping(BaseModel):
    """Maps source column names to record fields."""

    outlet_column: str = "outlet"
    date_column: str = "date"
    category_column: Optional[str] = "category"
    amount_column: str = "amount"
    description_column: Optional[str] = "description"
    quantity_column: Optional[str] = "quantity"
    unit_cost_column: Optional[str] = "unit_cost"
    total_cost_column: Optional[str] = "total_cost"
    notes_column: Optional[str] = "notes"


class ImportResult(BaseModel):
    """Outcome of storing a batch of rows."""

    success: bool = True
    record_type: str
    records_saved: int = 0
    outlets_created: List[str] = Field(default_factory=list)
    skipped: int = 0
    warnings: List[str] = Field(default_factory=list)
