"""Persistence operations that consume the clause composers."""

from .job_crud_async import JOB_FIELD_MAP
from .job_repository_async import AsyncJobRepository

__all__ = ["AsyncJobRepository", "JOB_FIELD_MAP"]
