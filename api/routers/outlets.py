"""Outlet and revenue policy endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel, Field, field_validator

from api.dependencies import get_api_key, get_outlet_service
from outletcogs.models.common import clean_outlet_name
from outletcogs.models.outlets import Outlet, PolicyUpdate, RevenuePolicy
from outletcogs.services.outlet_service import OutletService

router = APIRouter()


class OutletCreate(BaseModel):
    """Request body for a new outlet."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return clean_outlet_name(value)


@router.get("", response_model=List[Outlet])
async def list_outlets(
    api_key: str = Depends(get_api_key),
    service: OutletService = Depends(get_outlet_service),
):
    """List all outlets."""
    return service.list_outlets()


@router.post("", response_model=Outlet, status_code=status.HTTP_201_CREATED)
async def create_outlet(
    request: OutletCreate = Body(...),
    api_key: str = Depends(get_api_key),
    service: OutletService = Depends(get_outlet_service),
):
    """Create an outlet. Names are unique."""
    return service.create_outlet(request.name, request.description)


@router.get("/{outlet_id}", response_model=Outlet)
async def get_outlet(
    outlet_id: int,
    api_key: str = Depends(get_api_key),
    service: OutletService = Depends(get_outlet_service),
):
    return service.get_outlet(outlet_id)


@router.get("/{outlet_id}/policy", response_model=RevenuePolicy)
async def get_policy(
    outlet_id: int,
    api_key: str = Depends(get_api_key),
    service: OutletService = Depends(get_outlet_service),
):
    """Get the outlet's target COGS policy."""
    return service.get_policy(outlet_id)


@router.put("/{outlet_id}/policy", response_model=RevenuePolicy)
async def set_policy(
    outlet_id: int,
    request: PolicyUpdate = Body(...),
    api_key: str = Depends(get_api_key),
    service: OutletService = Depends(get_outlet_service),
):
    """
    Create or replace the outlet's target COGS policy.

    `lower_threshold` must be below `upper_threshold`.
    """
    return service.set_policy(outlet_id, request)
