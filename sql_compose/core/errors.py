"""Exception types raised by composers and persistence operations."""

from __future__ import annotations

from typing import Any


class SqlComposeError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(SqlComposeError, ValueError):
    """Raised when a caller hands a composer input it cannot build SQL from."""


class NotFoundError(SqlComposeError, LookupError):
    """Raised when an id-scoped operation matches no rows."""

    def __init__(self, message: str, *, job_id: Any = None):
        super().__init__(message)
        self.job_id = job_id
