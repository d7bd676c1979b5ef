"""
Outlet Data Models

Outlets, their revenue policy, and the financial records stored against them.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from outletcogs.models.common import CogsStatus


class Outlet(BaseModel):
    """A restaurant or retail outlet."""

    outlet_id: int
    name: str = Field(..., min_length=1, description="Unique outlet name")
    description: Optional[str] = None


class PolicyUpdate(BaseModel):
    """
    Target COGS policy values.

    Below ``lower_threshold`` revenue the target is multiplied by
    ``lower_adjustment`` (usually > 1, a looser target); above
    ``upper_threshold`` by ``upper_adjustment`` (usually < 1, stricter).
    """

    target_percentage: float = Field(default=25.0, ge=0, le=100, description="Standard target COGS %")
    lower_threshold: float = Field(default=1000.0, ge=0)
    lower_adjustment: float = Field(default=1.10, gt=0, description="Multiplier for low revenue days")
    upper_threshold: float = Field(default=5000.0, ge=0)
    upper_adjustment: float = Field(default=0.95, gt=0, description="Multiplier for high revenue days")

    @model_validator(mode="after")
    def check_thresholds(self):
        if self.lower_threshold >= self.upper_threshold:
            raise ValueError("lower_threshold must be less than upper_threshold")
        return self


class RevenuePolicy(PolicyUpdate):
    """The policy attached to one outlet."""

    outlet_id: int


class RevenueRecord(BaseModel):
    """Revenue for one outlet, day and category. Unique on that triple."""

    record_id: Optional[int] = None
    outlet_id: int
    record_date: date
    category: Optional[str] = None
    amount: float = Field(..., ge=0)
    notes: Optional[str] = None


class ProcurementRecord(BaseModel):
    """A procurement line item. Several per outlet/day are summed."""

    record_id: Optional[int] = None
    outlet_id: int
    record_date: date
    item_category: Optional[str] = None
    item_description: Optional[str] = None
    quantity: float = Field(default=1.0, ge=0)
    unit_cost: float = Field(..., ge=0)
    total_cost: float = Field(..., ge=0)
    notes: Optional[str] = None


class Alert(BaseModel):
    """Over-target alert, one per outlet and day."""

    alert_id: Optional[int] = None
    outlet_id: int
    outlet_name: Optional[str] = None
    alert_date: date
    actual_percentage: float
    target_percentage: float = Field(..., description="Adjusted target in effect for the day")
    variance: float
    status: CogsStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
