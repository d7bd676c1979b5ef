"""Tests for trend analysis helpers."""

from datetime import date, timedelta
from typing import List

import pytest

from outletcogs.models.cogs import DailyCogsResult
from outletcogs.models.common import CogsStatus, TrendDirection
from outletcogs.services.trend_analyzer import (
    half_difference,
    over_target_stats,
    rolling_average,
    trend_direction,
)


def make_series(percentages: List[float], target: float = 25.0) -> List[DailyCogsResult]:
    """Build a date-ascending series from COGS percentages."""
    start = date(2024, 3, 1)
    return [
        DailyCogsResult(
            outlet="Test Outlet",
            date=start + timedelta(days=i),
            revenue=1000.0,
            cost=pct * 10,
            cogs_percentage=pct,
            standard_target=target,
            adjusted_target=target,
            variance=target - pct,
            status=CogsStatus.WITHIN_TARGET if pct <= target else CogsStatus.OVER_TARGET,
        )
        for i, pct in enumerate(percentages)
    ]


def test_rolling_average():
    assert rolling_average(make_series([20, 25, 30])) == pytest.approx(25.0)


def test_rolling_average_empty():
    assert rolling_average([]) == 0.0


def test_flat_series_is_stable():
    series = make_series([27.5] * 5)

    assert half_difference(series) == 0
    assert trend_direction(series) == TrendDirection.STABLE


def test_increasing():
    assert trend_direction(make_series([20, 21, 25, 26])) == TrendDirection.INCREASING


def test_decreasing():
    assert trend_direction(make_series([30, 29, 24, 23])) == TrendDirection.DECREASING


def test_small_change_is_stable():
    assert trend_direction(make_series([25, 25, 25.5, 26])) == TrendDirection.STABLE


def test_fewer_than_three_days_is_stable():
    assert trend_direction(make_series([10, 40])) == TrendDirection.STABLE


def test_odd_length_first_half_is_smaller():
    # First half [20], second half [20, 23] -> difference 1.5
    series = make_series([20, 20, 23])

    assert half_difference(series) == pytest.approx(1.5)
    assert trend_direction(series) == TrendDirection.INCREASING


def test_over_target_stats():
    days_over, pct_over = over_target_stats(make_series([20, 30, 26, 25]))

    assert days_over == 2
    assert pct_over == pytest.approx(50.0)


def test_over_target_stats_empty():
    assert over_target_stats([]) == (0, 0.0)
