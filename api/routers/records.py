"""Revenue and procurement ingestion endpoints."""

from typing import List

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_api_key, get_import_service
from outletcogs.models.imports import ImportResult, ProcurementRow, RevenueRow
from outletcogs.services.import_service import ImportService

router = APIRouter()


@router.post("/revenue", response_model=ImportResult)
async def import_revenue(
    rows: List[RevenueRow] = Body(...),
    api_key: str = Depends(get_api_key),
    service: ImportService = Depends(get_import_service),
):
    """
    Store parsed revenue rows.

    Outlets are created on first sight. A row for an existing
    outlet/date/category replaces that amount.
    """
    return service.save_revenue_records(rows)


@router.post("/procurement", response_model=ImportResult)
async def import_procurement(
    rows: List[ProcurementRow] = Body(...),
    api_key: str = Depends(get_api_key),
    service: ImportService = Depends(get_import_service),
):
    """
    Store parsed procurement line items.

    `total_cost` defaults to `quantity * unit_cost`.
    """
    return service.save_procurement_records(rows)
