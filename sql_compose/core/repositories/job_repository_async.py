"""Async job repository facade over the statement-level job operations."""

from __future__ import annotations

from typing import Any

from ..contracts import AsyncDatabasePort
from ..criteria import CriteriaInput
from ..models import Job, JobDetail, NewJob
from ..types import FieldMap, UpdatePayload
from .job_crud_async import JOB_FIELD_MAP, delete, get, insert, list_rows, update


class AsyncJobRepository:
    """Job persistence backed by an `AsyncDatabasePort` implementation."""

    def __init__(
        self,
        db: AsyncDatabasePort,
        *,
        field_map: FieldMap = JOB_FIELD_MAP,
        table: str = "jobs",
        companies_table: str = "companies",
    ):
        """Create job repository.

        Args:
            db: Async database adapter; its dialect drives SQL rendering.
            field_map: External field name to column name for updates.
            table: Jobs table name.
            companies_table: Companies table joined by `get()`.
        """

        self.db = db
        self.d = db.dialect
        self.field_map = field_map
        self.table = table
        self.companies_table = companies_table

    async def create(self, job: NewJob) -> Job:
        """Insert a job. Backend constraint errors propagate unchanged."""

        return await insert(self, job)

    async def list(self, criteria: CriteriaInput = None) -> list[Job]:
        """List jobs, optionally filtered by title, minimum salary, or equity."""

        return await list_rows(self, criteria)

    async def get(self, job_id: Any) -> JobDetail:
        """Fetch one job with its company. Raises `NotFoundError` if missing."""

        return await get(self, job_id)

    async def update(self, job_id: Any, payload: UpdatePayload) -> Job:
        """Partially update a job.

        Raises:
            InvalidInputError: If `payload` is empty; nothing is executed.
            NotFoundError: If no job has `job_id`.
        """

        return await update(self, job_id, payload)

    async def remove(self, job_id: Any) -> None:
        """Delete a job. Raises `NotFoundError` if missing."""

        await delete(self, job_id)
