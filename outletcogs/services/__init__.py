"""
OutletCOGS Business Logic Services

Calculation modules are pure functions; service classes take a storage
repository at construction.
"""

from outletcogs.services.cogs_calculator import adjusted_target, evaluate_day, evaluate_series
from outletcogs.services.cogs_service import CogsService
from outletcogs.services.import_service import ImportService
from outletcogs.services.outlet_service import OutletService
from outletcogs.services.trend_analyzer import rolling_average, trend_direction

__all__ = [
    "adjusted_target",
    "evaluate_day",
    "evaluate_series",
    "rolling_average",
    "trend_direction",
    "CogsService",
    "ImportService",
    "OutletService",
]
