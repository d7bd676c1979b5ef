"""Data storage layer."""

from outletcogs.storage.repository import CogsRepository
from outletcogs.storage.sqlite_repo import SqliteRepository, get_connection, init_database

__all__ = [
    "CogsRepository",
    "SqliteRepository",
    "get_connection",
    "init_database",
]
