"""API Routers"""

from api.routers import dashboard, health, outlets, records

__all__ = ["dashboard", "health", "outlets", "records"]
