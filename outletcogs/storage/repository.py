"""
Storage Port

The operations the COGS engine needs from persistence. Services receive an
implementation at construction time.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional

from outletcogs.models.outlets import Alert, Outlet, ProcurementRecord, RevenuePolicy, RevenueRecord


class CogsRepository(ABC):
    """Persistence interface for outlets, policies, records and alerts."""

    # Outlets

    @abstractmethod
    def get_outlet(self, outlet_id: int) -> Optional[Outlet]:
        ...

    @abstractmethod
    def get_outlet_by_name(self, name: str) -> Optional[Outlet]:
        ...

    @abstractmethod
    def list_outlets(self) -> List[Outlet]:
        """All outlets in listing order (by id)."""

    @abstractmethod
    def create_outlet(self, name: str, description: Optional[str] = None) -> Outlet:
        ...

    # Policies

    @abstractmethod
    def get_policy(self, outlet_id: int) -> Optional[RevenuePolicy]:
        ...

    @abstractmethod
    def save_policy(self, policy: RevenuePolicy) -> RevenuePolicy:
        """Create or replace the policy for ``policy.outlet_id``."""

    # Aggregates

    @abstractmethod
    def sum_revenue(self, outlet_id: int, day: date) -> float:
        """Total revenue amount for the outlet and day, 0 if none."""

    @abstractmethod
    def sum_procurement_cost(self, outlet_id: int, day: date) -> float:
        """Total procurement cost for the outlet and day, 0 if none."""

    @abstractmethod
    def revenue_by_date(self, outlet_id: int, start_date: date, end_date: date) -> Dict[date, float]:
        """Revenue summed per date within the inclusive range."""

    @abstractmethod
    def procurement_cost_by_date(self, outlet_id: int, start_date: date, end_date: date) -> Dict[date, float]:
        """Procurement cost summed per date within the inclusive range."""

    # Records

    @abstractmethod
    def upsert_revenue(self, record: RevenueRecord) -> RevenueRecord:
        """Insert, or update the amount of, the (outlet, date, category) row."""

    @abstractmethod
    def add_procurement(self, record: ProcurementRecord) -> ProcurementRecord:
        ...

    # Alerts

    @abstractmethod
    def upsert_alert(self, alert: Alert) -> Alert:
        """Create or overwrite the alert for (outlet, date). Last write wins."""

    @abstractmethod
    def list_alerts_since(self, since: date) -> List[Alert]:
        """Alerts dated on or after ``since``, newest first, with outlet names."""

    # Health

    @abstractmethod
    def check_connection(self) -> bool:
        ...
