"""
OutletCOGS Core Package

Pure business logic for outlet COGS tracking, target adjustment, trends and alerts.
No framework dependencies (FastAPI) in this package.
"""

__version__ = "1.0.0"

from outletcogs.models.cogs import DailyCogsResult, DashboardData, TrendAnalysis
from outletcogs.models.outlets import Alert, Outlet, ProcurementRecord, RevenuePolicy, RevenueRecord

__all__ = [
    "Outlet",
    "RevenuePolicy",
    "RevenueRecord",
    "ProcurementRecord",
    "Alert",
    "DailyCogsResult",
    "TrendAnalysis",
    "DashboardData",
]
