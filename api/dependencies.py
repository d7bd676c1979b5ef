"""
API Dependencies

Services are built once in create_app and stored on app.state; these
dependencies hand them to the routers.
"""

from fastapi import Request

from api.config import Settings
from api.middleware.auth import verify_api_key as get_api_key
from outletcogs.services import CogsService, ImportService, OutletService
from outletcogs.storage.repository import CogsRepository

__all__ = [
    "get_api_key",
    "get_app_settings",
    "get_repository",
    "get_cogs_service",
    "get_outlet_service",
    "get_import_service",
]


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_repository(request: Request) -> CogsRepository:
    return request.app.state.repository


def get_cogs_service(request: Request) -> CogsService:
    return request.app.state.cogs_service


def get_outlet_service(request: Request) -> OutletService:
    return request.app.state.outlet_service


def get_import_service(request: Request) -> ImportService:
    return request.app.state.import_service
