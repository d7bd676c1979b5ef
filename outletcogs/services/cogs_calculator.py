"""
COGS Calculator

Pure per-day COGS math: revenue-band target adjustment, COGS percentage,
variance and status. No storage access.
"""

from datetime import date
from typing import Dict, List

from outletcogs.models.cogs import DailyCogsResult
from outletcogs.models.common import CogsStatus
from outletcogs.models.outlets import RevenuePolicy


def adjusted_target(
    revenue: float,
    standard_target: float,
    lower_threshold: float,
    lower_adjustment: float,
    upper_threshold: float,
    upper_adjustment: float,
) -> float:
    """
    Adjust the standard target COGS % for the day's revenue.

    Thresholds are strict: revenue equal to a threshold keeps the
    standard target.
    """
    if revenue < lower_threshold:
        return standard_target * lower_adjustment
    elif revenue > upper_threshold:
        return standard_target * upper_adjustment
    else:
        return standard_target


def adjusted_target_for_policy(revenue: float, policy: RevenuePolicy) -> float:
    """Apply an outlet's policy to a revenue figure."""
    return adjusted_target(
        revenue,
        policy.target_percentage,
        policy.lower_threshold,
        policy.lower_adjustment,
        policy.upper_threshold,
        policy.upper_adjustment,
    )


def cogs_percentage(revenue: float, cost: float) -> float:
    """Cost as a percentage of revenue; 0 when there is no revenue."""
    return (cost * 100 / revenue) if revenue > 0 else 0.0


def evaluate_day(
    outlet_name: str,
    day: date,
    revenue: float,
    cost: float,
    policy: RevenuePolicy,
) -> DailyCogsResult:
    """Evaluate one outlet-day against its policy."""
    pct = cogs_percentage(revenue, cost)
    target = adjusted_target_for_policy(revenue, policy)

    # Positive variance means under target
    variance = target - pct
    status = CogsStatus.WITHIN_TARGET if pct <= target else CogsStatus.OVER_TARGET

    return DailyCogsResult(
        outlet=outlet_name,
        date=day,
        revenue=revenue,
        cost=cost,
        cogs_percentage=pct,
        standard_target=policy.target_percentage,
        adjusted_target=target,
        variance=variance,
        status=status,
    )


def evaluate_series(
    outlet_name: str,
    revenue_by_date: Dict[date, float],
    cost_by_date: Dict[date, float],
    policy: RevenuePolicy,
) -> List[DailyCogsResult]:
    """
    Evaluate every date that has revenue or cost.

    Uses the union of dates; a missing side counts as 0. Results are
    sorted ascending by date.
    """
    results = []

    for day in set(revenue_by_date.keys()) | set(cost_by_date.keys()):
        results.append(evaluate_day(
            outlet_name,
            day,
            revenue_by_date.get(day, 0.0),
            cost_by_date.get(day, 0.0),
            policy,
        ))

    results.sort(key=lambda r: r.date)
    return results
