"""COGS dashboard and calculation endpoints."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.config import Settings
from api.dependencies import get_api_key, get_app_settings, get_cogs_service
from outletcogs.models.cogs import DailyCogsResult, DashboardData, TrendAnalysis
from outletcogs.models.outlets import Alert
from outletcogs.services.cogs_service import CogsService

router = APIRouter()


@router.get("", response_model=DashboardData)
async def get_dashboard(
    day: Optional[date] = Query(None, alias="date", description="Defaults to today"),
    api_key: str = Depends(get_api_key),
    settings: Settings = Depends(get_app_settings),
    service: CogsService = Depends(get_cogs_service),
):
    """
    Dashboard for all outlets on a day.

    Returns fleet totals, per-outlet COGS and the most recent alerts.
    """
    return service.get_dashboard(
        day or date.today(),
        alert_limit=settings.dashboard_alert_limit,
        alert_days=settings.alert_lookback_days,
    )


@router.get("/outlet/{outlet_id}", response_model=TrendAnalysis)
async def get_outlet_detail(
    outlet_id: int,
    days: Optional[int] = Query(None, ge=1, le=366),
    api_key: str = Depends(get_api_key),
    settings: Settings = Depends(get_app_settings),
    service: CogsService = Depends(get_cogs_service),
):
    """Trend analysis for one outlet over the last ``days`` days (default 30)."""
    return service.analyze_trend(outlet_id, days or settings.outlet_detail_days)


@router.get("/daily/all/{day}", response_model=List[DailyCogsResult])
async def calculate_daily_all_outlets(
    day: date,
    api_key: str = Depends(get_api_key),
    service: CogsService = Depends(get_cogs_service),
):
    """
    Calculate COGS for every outlet on a day.

    Outlets that cannot be evaluated (e.g. no policy) are left out.
    """
    return service.calculate_all_outlets(day)


@router.get("/daily/{outlet_id}/{day}", response_model=DailyCogsResult)
async def calculate_daily(
    outlet_id: int,
    day: date,
    api_key: str = Depends(get_api_key),
    service: CogsService = Depends(get_cogs_service),
):
    """
    Calculate COGS for one outlet and day.

    Records an alert when the day is over target.
    """
    return service.calculate_daily(outlet_id, day)


@router.get("/range/{outlet_id}/{start_date}/{end_date}", response_model=List[DailyCogsResult])
async def calculate_range(
    outlet_id: int,
    start_date: date,
    end_date: date,
    api_key: str = Depends(get_api_key),
    service: CogsService = Depends(get_cogs_service),
):
    """Per-day COGS over an inclusive date range, oldest first."""
    return service.calculate_range(outlet_id, start_date, end_date)


@router.get("/trends/{outlet_id}", response_model=TrendAnalysis)
async def analyze_trend(
    outlet_id: int,
    days: Optional[int] = Query(None, ge=1, le=366),
    api_key: str = Depends(get_api_key),
    settings: Settings = Depends(get_app_settings),
    service: CogsService = Depends(get_cogs_service),
):
    """Rolling average, trend direction and over-target frequency."""
    return service.analyze_trend(outlet_id, days or settings.default_trend_days)


@router.get("/alerts", response_model=List[Alert])
async def get_current_alerts(
    api_key: str = Depends(get_api_key),
    settings: Settings = Depends(get_app_settings),
    service: CogsService = Depends(get_cogs_service),
):
    """Alerts from the lookback window, newest first."""
    return service.get_current_alerts(days=settings.alert_lookback_days)
