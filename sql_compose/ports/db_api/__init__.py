"""DB-API adapter and dialect exports."""

from ...core.dialects import Dialect, PostgresDialect, SQLiteDialect
from .async_database import AsyncDatabase

__all__ = [
    "AsyncDatabase",
    "Dialect",
    "PostgresDialect",
    "SQLiteDialect",
]
