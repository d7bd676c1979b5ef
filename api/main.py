"""
OutletCOGS FastAPI Application

Main entry point for the API server.
Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings, get_settings
from api.middleware.errors import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.routers import dashboard, health, outlets, records
from outletcogs.services import CogsService, ImportService, OutletService
from outletcogs.storage.repository import CogsRepository
from outletcogs.storage.sqlite_repo import SqliteRepository, init_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    repository = app.state.repository
    if isinstance(repository, SqliteRepository):
        init_database(repository.db_path)
        logger.info(f"Database initialized at {repository.db_path}")

    yield

    # Shutdown
    logger.info("Shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[CogsRepository] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The repository and services are built here and attached to
    ``app.state``; pass a repository to run against other storage.
    """
    settings = settings or get_settings()
    repository = repository or SqliteRepository(settings.database_path)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="API for outlet COGS tracking, target alerts and trends",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.repository = repository
    app.state.cogs_service = CogsService(repository)
    app.state.outlet_service = OutletService(repository)
    app.state.import_service = ImportService(repository)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(
        dashboard.router,
        prefix="/api/v1/dashboard",
        tags=["Dashboard"]
    )
    app.include_router(
        outlets.router,
        prefix="/api/v1/outlets",
        tags=["Outlets"]
    )
    app.include_router(
        records.router,
        prefix="/api/v1/records",
        tags=["Records"]
    )

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
