"""COGS calculation result models."""

from datetime import date
from typing import List

from pydantic import BaseModel, Field

from outletcogs.models.common import CogsStatus, TrendDirection
from outletcogs.models.outlets import Alert


class DailyCogsResult(BaseModel):
    """COGS evaluation of one outlet for one day."""

    outlet: str
    date: date
    revenue: float
    cost: float
    cogs_percentage: float = Field(..., description="Cost / Revenue * 100, 0 when no revenue")
    standard_target: float
    adjusted_target: float
    variance: float = Field(..., description="Adjusted target - COGS %, positive is under target")
    status: CogsStatus


class TrendAnalysis(BaseModel):
    """Trend over a trailing window of days."""

    outlet: str
    start_date: date
    end_date: date
    rolling_average: float
    trend_direction: TrendDirection = TrendDirection.STABLE
    days_over_target: int = 0
    percentage_over_target: float = 0.0
    daily_data: List[DailyCogsResult] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    """Fleet totals for one day."""

    total_revenue: float = 0.0
    total_cost: float = 0.0
    overall_cogs_percentage: float = 0.0
    outlets_within_target: int = 0
    outlets_over_target: int = 0


class DashboardData(BaseModel):
    """Everything the dashboard shows for a day."""

    date: date
    summary: DashboardSummary
    outlets: List[DailyCogsResult]
    alerts: List[Alert]
