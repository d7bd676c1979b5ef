"""Health check endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.config import Settings
from api.dependencies import get_app_settings, get_repository
from outletcogs.storage.repository import CogsRepository

router = APIRouter()

logger = logging.getLogger("outletcogs.api")


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic liveness check.

    Returns 200 if the service is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/health/ready")
async def readiness_check(
    settings: Settings = Depends(get_app_settings),
    repository: CogsRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """
    Readiness check - verifies the database is reachable.
    """
    checks = {"database": {"status": "ok"}}

    try:
        repository.check_connection()
    except Exception as e:
        logger.warning(f"Database readiness check failed: {e}")
        checks["database"] = {"status": "error", "message": str(e)}

    all_ok = all(c.get("status") == "ok" for c in checks.values())

    return {
        "status": "ready" if all_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "checks": checks
    }


@router.get("/health/info")
async def service_info(
    settings: Settings = Depends(get_app_settings)
) -> Dict[str, Any]:
    """Return service information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": "development" if settings.debug else "production",
    }
