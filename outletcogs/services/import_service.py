"""
Import Service - Stores already-parsed revenue and procurement rows

Outlets are found or created by name. Revenue is upserted on
(outlet, date, category); procurement rows are appended as line items.
Spreadsheet decoding happens upstream; this service accepts row models
or a pandas DataFrame of raw cells.
"""

import logging
from typing import Dict, List, Optional, Tuple

import pandas as pd

from outletcogs.exceptions import ValidationError
from outletcogs.models.imports import ColumnMapping, ImportResult, ProcurementRow, RevenueRow
from outletcogs.models.outlets import Outlet, ProcurementRecord, RevenueRecord
from outletcogs.storage.repository import CogsRepository

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Default"


class ImportService:
    """Saves imported financial rows against outlets."""

    def __init__(self, repository: CogsRepository):
        self.repository = repository

    # =========================================================================
    # Saving
    # =========================================================================

    def save_revenue_records(self, rows: List[RevenueRow]) -> ImportResult:
        """Upsert revenue rows. Re-importing a day/category replaces its amount."""
        result = ImportResult(record_type="revenue")
        outlets: Dict[str, Outlet] = {}

        for row in rows:
            outlet = self._find_or_create_outlet(row.outlet_name, outlets, result)
            self.repository.upsert_revenue(RevenueRecord(
                outlet_id=outlet.outlet_id,
                record_date=row.record_date,
                category=row.category or DEFAULT_CATEGORY,
                amount=row.amount,
                notes=row.notes,
            ))
            result.records_saved += 1

        logger.info(f"Saved {result.records_saved} revenue records")
        return result

    def save_procurement_records(self, rows: List[ProcurementRow]) -> ImportResult:
        """Insert procurement line items."""
        result = ImportResult(record_type="procurement")
        outlets: Dict[str, Outlet] = {}

        for row in rows:
            outlet = self._find_or_create_outlet(row.outlet_name, outlets, result)
            total_cost = row.total_cost if row.total_cost is not None else row.quantity * row.unit_cost

            self.repository.add_procurement(ProcurementRecord(
                outlet_id=outlet.outlet_id,
                record_date=row.record_date,
                item_category=row.item_category or DEFAULT_CATEGORY,
                item_description=row.item_description,
                quantity=row.quantity,
                unit_cost=row.unit_cost,
                total_cost=total_cost,
                notes=row.notes,
            ))
            result.records_saved += 1

        logger.info(f"Saved {result.records_saved} procurement records")
        return result

    def import_revenue_frame(self, df: pd.DataFrame, mapping: Optional[ColumnMapping] = None) -> ImportResult:
        """Normalise a revenue DataFrame and save it."""
        rows, skipped = revenue_rows_from_frame(df, mapping or ColumnMapping())
        result = self.save_revenue_records(rows)
        return self._with_skipped(result, skipped)

    def import_procurement_frame(self, df: pd.DataFrame, mapping: Optional[ColumnMapping] = None) -> ImportResult:
        """Normalise a procurement DataFrame and save it."""
        rows, skipped = procurement_rows_from_frame(df, mapping or ColumnMapping())
        result = self.save_procurement_records(rows)
        return self._with_skipped(result, skipped)

    def _find_or_create_outlet(
        self,
        name: str,
        cache: Dict[str, Outlet],
        result: ImportResult,
    ) -> Outlet:
        name = name.strip()
        if not name:
            raise ValidationError("Outlet name must not be blank")
        if name in cache:
            return cache[name]

        outlet = self.repository.get_outlet_by_name(name)
        if not outlet:
            outlet = self.repository.create_outlet(name, description=f"Outlet for {name}")
            result.outlets_created.append(name)

        cache[name] = outlet
        return outlet

    def _with_skipped(self, result: ImportResult, skipped: int) -> ImportResult:
        result.skipped = skipped
        if skipped:
            result.warnings.append(f"Skipped {skipped} rows missing outlet, date or amount")
        return result


# =============================================================================
# DataFrame normalisation
# =============================================================================

def _column(df: pd.DataFrame, col: Optional[str]) -> pd.Series:
    """Column by name, or an all-NA series when absent."""
    if col and col in df.columns:
        return df[col]
    return pd.Series([None] * len(df), index=df.index, dtype="object")


def _text(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    return str(value).strip() or None


def _prepare(df: pd.DataFrame, mapping: ColumnMapping) -> pd.DataFrame:
    """Common cleaning: outlet names and dates."""
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]

    df["_outlet"] = _column(df, mapping.outlet_column).map(_text)
    df["_date"] = pd.to_datetime(_column(df, mapping.date_column), errors="coerce")
    return df


def revenue_rows_from_frame(df: pd.DataFrame, mapping: ColumnMapping) -> Tuple[List[RevenueRow], int]:
    """
    Convert a raw revenue table to rows.

    Rows without an outlet name, a parseable date or a numeric amount are
    dropped. Returns (rows, dropped count).
    """
    df = _prepare(df, mapping)
    df["_amount"] = pd.to_numeric(_column(df, mapping.amount_column), errors="coerce")

    valid = df.dropna(subset=["_outlet", "_date", "_amount"])
    valid = valid[valid["_amount"] >= 0]

    rows = [
        RevenueRow(
            outlet_name=row["_outlet"],
            record_date=row["_date"].date(),
            category=_text(row.get(mapping.category_column)) if mapping.category_column else None,
            amount=float(row["_amount"]),
            notes=_text(row.get(mapping.notes_column)) if mapping.notes_column else None,
        )
        for _, row in valid.iterrows()
    ]

    return rows, len(df) - len(rows)


def procurement_rows_from_frame(df: pd.DataFrame, mapping: ColumnMapping) -> Tuple[List[ProcurementRow], int]:
    """
    Convert a raw procurement table to rows.

    Quantity defaults to 1 when blank or zero; total cost defaults to
    quantity * unit cost. Rows without an outlet name, a parseable date or
    a resolvable total cost are dropped. Returns (rows, dropped count).
    """
    df = _prepare(df, mapping)

    quantity = pd.to_numeric(_column(df, mapping.quantity_column), errors="coerce")
    df["_quantity"] = quantity.where(quantity.notna() & (quantity != 0), 1.0)
    df["_unit_cost"] = pd.to_numeric(_column(df, mapping.unit_cost_column), errors="coerce")

    total = pd.to_numeric(_column(df, mapping.total_cost_column), errors="coerce")
    df["_total_cost"] = total.where(total.notna() & (total != 0), df["_quantity"] * df["_unit_cost"])

    valid = df.dropna(subset=["_outlet", "_date", "_total_cost"])
    valid = valid[
        (valid["_total_cost"] >= 0)
        & (valid["_quantity"] >= 0)
        & (valid["_unit_cost"].isna() | (valid["_unit_cost"] >= 0))
    ]

    rows = []
    for _, row in valid.iterrows():
        unit_cost = row["_unit_cost"]
        rows.append(ProcurementRow(
            outlet_name=row["_outlet"],
            record_date=row["_date"].date(),
            item_category=_text(row.get(mapping.category_column)) if mapping.category_column else None,
            item_description=_text(row.get(mapping.description_column)) if mapping.description_column else None,
            quantity=float(row["_quantity"]),
            unit_cost=0.0 if pd.isna(unit_cost) else float(unit_cost),
            total_cost=float(row["_total_cost"]),
            notes=_text(row.get(mapping.notes_column)) if mapping.notes_column else None,
        ))

    return rows, len(df) - len(rows)
