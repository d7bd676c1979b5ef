"""
COGS Service

Daily, range, trend and fleet COGS calculations for outlets, plus alert
upserts. Storage is injected; the math lives in cogs_calculator and
trend_analyzer.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple

from outletcogs.exceptions import NotFoundError, ValidationError
from outletcogs.models.cogs import DailyCogsResult, DashboardData, DashboardSummary, TrendAnalysis
from outletcogs.models.common import CogsStatus
from outletcogs.models.outlets import Alert, Outlet, RevenuePolicy
from outletcogs.services import trend_analyzer
from outletcogs.services.cogs_calculator import cogs_percentage, evaluate_day, evaluate_series
from outletcogs.storage.repository import CogsRepository

logger = logging.getLogger(__name__)


class CogsService:
    """COGS calculations and alerting for outlets."""

    def __init__(self, repository: CogsRepository):
        self.repository = repository

    # =========================================================================
    # Daily
    # =========================================================================

    def calculate_daily(self, outlet_id: int, day: date) -> DailyCogsResult:
        """
        Calculate COGS for one outlet and day.

        Raises NotFoundError if the outlet or its policy is missing. When the
        day is over target the alert is written before returning; a failed
        alert write is logged and the result is still returned.
        """
        outlet, policy = self._load_outlet_and_policy(outlet_id)

        total_revenue = self.repository.sum_revenue(outlet_id, day)
        total_cost = self.repository.sum_procurement_cost(outlet_id, day)

        result = evaluate_day(outlet.name, day, total_revenue, total_cost, policy)

        if result.status == CogsStatus.OVER_TARGET:
            try:
                self.upsert_alert(
                    outlet_id,
                    day,
                    result.cogs_percentage,
                    result.adjusted_target,
                    result.variance,
                    result.status,
                )
            except Exception:
                logger.exception(f"Failed to record alert for outlet {outlet.name} on {day}")

        return result

    # =========================================================================
    # Range and trend
    # =========================================================================

    def calculate_range(self, outlet_id: int, start_date: date, end_date: date) -> List[DailyCogsResult]:
        """
        Calculate COGS per day over an inclusive date range.

        Read-only: alerts are never written from a range query.
        """
        if start_date > end_date:
            raise ValidationError(
                f"start_date {start_date} is after end_date {end_date}",
                details={"start_date": str(start_date), "end_date": str(end_date)},
            )

        outlet, policy = self._load_outlet_and_policy(outlet_id)

        revenue = self.repository.revenue_by_date(outlet_id, start_date, end_date)
        costs = self.repository.procurement_cost_by_date(outlet_id, start_date, end_date)

        return evaluate_series(outlet.name, revenue, costs, policy)

    def analyze_trend(self, outlet_id: int, days: int = 7, as_of: Optional[date] = None) -> TrendAnalysis:
        """Trend over the window ``[as_of - days, as_of]``, ``as_of`` defaulting to today."""
        if days < 1:
            raise ValidationError("days must be at least 1", details={"days": days})

        outlet = self._require_outlet(outlet_id)

        end_date = as_of or date.today()
        start_date = end_date - timedelta(days=days)

        daily = self.calculate_range(outlet_id, start_date, end_date)
        days_over, pct_over = trend_analyzer.over_target_stats(daily)

        return TrendAnalysis(
            outlet=outlet.name,
            start_date=start_date,
            end_date=end_date,
            rolling_average=trend_analyzer.rolling_average(daily),
            trend_direction=trend_analyzer.trend_direction(daily),
            days_over_target=days_over,
            percentage_over_target=pct_over,
            daily_data=daily,
        )

    # =========================================================================
    # Fleet
    # =========================================================================

    def calculate_all_outlets(self, day: date) -> List[DailyCogsResult]:
        """
        Calculate COGS for every outlet on a day.

        An outlet whose calculation fails is logged and left out; the rest
        are still returned.
        """
        results = []

        for outlet in self.repository.list_outlets():
            try:
                results.append(self.calculate_daily(outlet.outlet_id, day))
            except Exception as e:
                logger.warning(f"Skipping outlet {outlet.name} for {day}: {e}")

        return results

    def get_dashboard(
        self,
        day: date,
        alert_limit: int = 5,
        alert_days: int = 7,
    ) -> DashboardData:
        """Fleet results, totals and most recent alerts for a day."""
        outlets = self.calculate_all_outlets(day)
        alerts = self.get_current_alerts(days=alert_days)

        total_revenue = sum(r.revenue for r in outlets)
        total_cost = sum(r.cost for r in outlets)

        summary = DashboardSummary(
            total_revenue=total_revenue,
            total_cost=total_cost,
            overall_cogs_percentage=cogs_percentage(total_revenue, total_cost),
            outlets_within_target=sum(1 for r in outlets if r.status == CogsStatus.WITHIN_TARGET),
            outlets_over_target=sum(1 for r in outlets if r.status == CogsStatus.OVER_TARGET),
        )

        return DashboardData(
            date=day,
            summary=summary,
            outlets=outlets,
            alerts=alerts[:alert_limit],
        )

    # =========================================================================
    # Alerts
    # =========================================================================

    def upsert_alert(
        self,
        outlet_id: int,
        day: date,
        actual_percentage: float,
        target_percentage: float,
        variance: float,
        status: CogsStatus,
    ) -> Alert:
        """Create or overwrite the alert for (outlet, day)."""
        alert = self.repository.upsert_alert(Alert(
            outlet_id=outlet_id,
            alert_date=day,
            actual_percentage=actual_percentage,
            target_percentage=target_percentage,
            variance=variance,
            status=status,
        ))
        logger.info(
            f"Alert for outlet {outlet_id} on {day}: "
            f"{actual_percentage:.2f}% vs target {target_percentage:.2f}%"
        )
        return alert

    def get_current_alerts(self, days: int = 7, as_of: Optional[date] = None) -> List[Alert]:
        """Alerts from the last ``days`` days, newest first."""
        since = (as_of or date.today()) - timedelta(days=days)
        return self.repository.list_alerts_since(since)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_outlet(self, outlet_id: int) -> Outlet:
        outlet = self.repository.get_outlet(outlet_id)
        if not outlet:
            raise NotFoundError("Outlet", outlet_id)
        return outlet

    def _load_outlet_and_policy(self, outlet_id: int) -> Tuple[Outlet, RevenuePolicy]:
        outlet = self._require_outlet(outlet_id)

        policy = self.repository.get_policy(outlet_id)
        if not policy:
            raise NotFoundError("Revenue policy", outlet.name)

        return outlet, policy
