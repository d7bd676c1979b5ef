"""Pytest configuration and fixtures."""

import os
from datetime import date
from pathlib import Path
from typing import Callable, Generator, Optional

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ["API_KEYS"] = ""

from outletcogs.models.outlets import Outlet, ProcurementRecord, RevenuePolicy, RevenueRecord
from outletcogs.services.cogs_service import CogsService
from outletcogs.storage.sqlite_repo import SqliteRepository, init_database


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Path to a fresh, initialised SQLite database."""
    path = str(tmp_path / "db" / "test.db")
    init_database(path)
    return path


@pytest.fixture
def repository(db_path: str) -> SqliteRepository:
    return SqliteRepository(db_path)


@pytest.fixture
def cogs_service(repository: SqliteRepository) -> CogsService:
    return CogsService(repository)


@pytest.fixture
def make_outlet(repository: SqliteRepository) -> Callable[..., Outlet]:
    """Factory creating an outlet, with the standard test policy unless policy=False."""

    def _make(name: str = "Test Outlet", policy: bool = True) -> Outlet:
        outlet = repository.create_outlet(name, description=f"{name} for tests")
        if policy:
            repository.save_policy(RevenuePolicy(
                outlet_id=outlet.outlet_id,
                target_percentage=25,
                lower_threshold=500,
                lower_adjustment=1.2,
                upper_threshold=2000,
                upper_adjustment=0.9,
            ))
        return outlet

    return _make


@pytest.fixture
def add_day(repository: SqliteRepository) -> Callable[..., None]:
    """Factory storing revenue and/or cost for an outlet-day."""

    def _add(
        outlet_id: int,
        day: date,
        revenue: Optional[float] = None,
        cost: Optional[float] = None,
        category: str = "Food",
    ) -> None:
        if revenue is not None:
            repository.upsert_revenue(RevenueRecord(
                outlet_id=outlet_id, record_date=day, category=category, amount=revenue,
            ))
        if cost is not None:
            repository.add_procurement(ProcurementRecord(
                outlet_id=outlet_id,
                record_date=day,
                item_category=category,
                item_description="Test item",
                quantity=1,
                unit_cost=cost,
                total_cost=cost,
            ))

    return _add


@pytest.fixture
def api_client(db_path: str) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client against the temporary database."""
    from api.config import Settings
    from api.main import create_app

    settings = Settings(debug=True, api_keys="", database_path=db_path)
    app = create_app(settings=settings, repository=SqliteRepository(db_path))

    with TestClient(app) as client:
        yield client
