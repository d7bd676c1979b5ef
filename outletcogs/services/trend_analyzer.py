"""
Trend Analyzer

Rolling average, trend direction and over-target frequency over a series
of daily COGS results.
"""

import statistics
from typing import List, Tuple

from outletcogs.models.cogs import DailyCogsResult
from outletcogs.models.common import CogsStatus, TrendDirection

# Percentage points the second half must move before a trend is called
TREND_THRESHOLD = 1.0
MIN_TREND_DAYS = 3


def rolling_average(results: List[DailyCogsResult]) -> float:
    """Mean COGS % over all days, 0 for an empty series."""
    if not results:
        return 0.0
    return statistics.mean(r.cogs_percentage for r in results)


def half_difference(results: List[DailyCogsResult]) -> float:
    """
    Second-half mean minus first-half mean of COGS %.

    The split point is ``len // 2`` so the first half is the smaller one
    for odd lengths. Expects a date-ascending series of at least 2 days.
    """
    mid = len(results) // 2
    first_half = [r.cogs_percentage for r in results[:mid]]
    second_half = [r.cogs_percentage for r in results[mid:]]

    return statistics.mean(second_half) - statistics.mean(first_half)


def trend_direction(results: List[DailyCogsResult]) -> TrendDirection:
    """Classify the series; fewer than 3 days is always stable."""
    if len(results) < MIN_TREND_DAYS:
        return TrendDirection.STABLE

    difference = half_difference(results)

    if difference > TREND_THRESHOLD:
        return TrendDirection.INCREASING
    elif difference < -TREND_THRESHOLD:
        return TrendDirection.DECREASING
    else:
        return TrendDirection.STABLE


def over_target_stats(results: List[DailyCogsResult]) -> Tuple[int, float]:
    """Return (days over target, percentage of days over target)."""
    days_over = sum(1 for r in results if r.status == CogsStatus.OVER_TARGET)
    pct_over = (days_over / len(results) * 100) if results else 0.0
    return days_over, pct_over
