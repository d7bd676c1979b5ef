"""Tests for record ingestion."""

from datetime import date

import pandas as pd
import pytest
from pydantic import ValidationError as PydanticValidationError

from outletcogs.exceptions import ValidationError
from outletcogs.models.imports import ColumnMapping, ProcurementRow, RevenueRow
from outletcogs.services.import_service import (
    ImportService,
    procurement_rows_from_frame,
    revenue_rows_from_frame,
)

DAY = date(2024, 3, 1)


@pytest.fixture
def import_service(repository):
    return ImportService(repository)


class TestSaveRows:

    def test_revenue_creates_outlets_once(self, import_service, repository):
        result = import_service.save_revenue_records([
            RevenueRow(outlet_name="Downtown", record_date=DAY, category="Food", amount=700),
            RevenueRow(outlet_name="Downtown", record_date=DAY, category="Drinks", amount=300),
            RevenueRow(outlet_name="Airport", record_date=DAY, amount=100),
        ])

        assert result.records_saved == 3
        assert result.outlets_created == ["Downtown", "Airport"]
        downtown = repository.get_outlet_by_name("Downtown")
        assert downtown.description == "Outlet for Downtown"
        assert repository.sum_revenue(downtown.outlet_id, DAY) == 1000

    def test_revenue_reimport_updates(self, import_service, repository):
        row = RevenueRow(outlet_name="Downtown", record_date=DAY, category="Food", amount=700)
        import_service.save_revenue_records([row])

        result = import_service.save_revenue_records([row.model_copy(update={"amount": 900})])

        assert result.outlets_created == []
        outlet = repository.get_outlet_by_name("Downtown")
        assert repository.sum_revenue(outlet.outlet_id, DAY) == 900

    def test_procurement_lines_are_summed(self, import_service, repository):
        import_service.save_procurement_records([
            ProcurementRow(outlet_name="Downtown", record_date=DAY, quantity=10, unit_cost=2.5),
            ProcurementRow(outlet_name="Downtown", record_date=DAY, quantity=1, unit_cost=0, total_cost=75),
        ])

        outlet = repository.get_outlet_by_name("Downtown")
        assert repository.sum_procurement_cost(outlet.outlet_id, DAY) == 100

    def test_outlet_names_are_stripped(self, import_service, repository):
        import_service.save_revenue_records([
            RevenueRow(outlet_name="  Downtown ", record_date=DAY, amount=100),
        ])

        assert [o.name for o in repository.list_outlets()] == ["Downtown"]

    def test_blank_outlet_name_rows_are_rejected(self):
        with pytest.raises(PydanticValidationError):
            RevenueRow(outlet_name="   ", record_date=DAY, amount=100)
        with pytest.raises(PydanticValidationError):
            ProcurementRow(outlet_name="\t", record_date=DAY, unit_cost=5)

    def test_blank_outlet_name_leaves_fleet_intact(
        self, import_service, repository, cogs_service, make_outlet, add_day
    ):
        good = make_outlet("Good")
        add_day(good.outlet_id, DAY, revenue=1000, cost=200)
        row = RevenueRow.model_construct(
            outlet_name="   ", record_date=DAY, category=None, amount=100.0, notes=None
        )

        with pytest.raises(ValidationError):
            import_service.save_revenue_records([row])

        assert [o.name for o in repository.list_outlets()] == ["Good"]
        assert [r.outlet for r in cogs_service.calculate_all_outlets(DAY)] == ["Good"]


class TestFrames:

    def test_revenue_frame_drops_invalid_rows(self):
        df = pd.DataFrame({
            "outlet": ["Downtown", None, "Airport", "Airport"],
            "date": ["2024-03-01", "2024-03-01", "not a date", "2024-03-02"],
            "category": ["Food", "Food", "Food", None],
            "amount": ["1000", "50", "20", "abc"],
        })

        rows, skipped = revenue_rows_from_frame(df, ColumnMapping())

        assert skipped == 3
        assert len(rows) == 1
        assert rows[0].outlet_name == "Downtown"
        assert rows[0].record_date == DAY
        assert rows[0].amount == 1000.0
        assert rows[0].category == "Food"

    def test_procurement_frame_defaults(self):
        df = pd.DataFrame({
            "Store": ["Downtown", "Downtown", "Downtown"],
            "Day": ["2024-03-01", "2024-03-01", "2024-03-01"],
            "Qty": [None, 4, 2],
            "Cost": [12.0, 2.5, None],
            "Total": [None, None, None],
        })
        mapping = ColumnMapping(
            outlet_column="Store",
            date_column="Day",
            quantity_column="Qty",
            unit_cost_column="Cost",
            total_cost_column="Total",
        )

        rows, skipped = procurement_rows_from_frame(df, mapping)

        assert skipped == 1
        assert [r.quantity for r in rows] == [1.0, 4.0]
        assert [r.total_cost for r in rows] == [12.0, 10.0]

    def test_import_frame_reports_skipped(self, import_service):
        df = pd.DataFrame({
            "outlet": ["Downtown", "Downtown"],
            "date": ["2024-03-01", None],
            "amount": [100, 200],
        })

        result = import_service.import_revenue_frame(df)

        assert result.records_saved == 1
        assert result.skipped == 1
        assert result.warnings
