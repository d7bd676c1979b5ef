"""Data models for OutletCOGS."""

from outletcogs.models.cogs import DailyCogsResult, DashboardData, DashboardSummary, TrendAnalysis
from outletcogs.models.common import CogsStatus, TrendDirection
from outletcogs.models.imports import ColumnMapping, ImportResult, ProcurementRow, RevenueRow
from outletcogs.models.outlets import (
    Alert,
    Outlet,
    PolicyUpdate,
    ProcurementRecord,
    RevenuePolicy,
    RevenueRecord,
)

__all__ = [
    # Common
    "CogsStatus",
    "TrendDirection",
    # Outlets
    "Outlet",
    "RevenuePolicy",
    "PolicyUpdate",
    "RevenueRecord",
    "ProcurementRecord",
    "Alert",
    # COGS
    "DailyCogsResult",
    "TrendAnalysis",
    "DashboardSummary",
    "DashboardData",
    # Imports
    "RevenueRow",
    "ProcurementRow",
    "ColumnMapping",
    "ImportResult",
]
