"""Async statement-level job operations used by `AsyncJobRepository`."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from ..criteria import CriteriaInput, compose_filter_clause
from ..errors import NotFoundError
from ..log import get_logger
from ..models import Job, JobDetail, NewJob, row_to_job_detail, row_to_model, to_dict
from ..query_builder import ParamBinder, WhereBuilder, compose_set_clause
from ..types import FieldMap, UpdatePayload

logger = get_logger(__name__)

JOB_FIELD_MAP: FieldMap = MappingProxyType(
    {
        "title": "title",
        "salary": "salary",
        "equity": "equity",
    }
)

_INSERT_COLUMNS = ("title", "salary", "equity", "company_handle")
_RETURN_COLUMNS = "id, title, salary, equity, company_handle"


async def insert(repo: Any, job: NewJob) -> Job:
    """Insert one job and return the stored row."""

    data = to_dict(job)
    binder = ParamBinder(repo.d)
    placeholders = ", ".join(binder.bind(data[name]) for name in _INSERT_COLUMNS)
    sql = (
        f"INSERT INTO {repo.table} ({', '.join(_INSERT_COLUMNS)}) "
        f"VALUES ({placeholders}) RETURNING {_RETURN_COLUMNS}"
    )
    row = await repo.db.fetchone(sql, binder.params)
    created = row_to_model(Job, row)
    logger.info("job_created", job_id=created.id, company_handle=created.company_handle)
    return created


async def list_rows(repo: Any, criteria: CriteriaInput = None) -> list[Job]:
    """List jobs matching optional filters, ordered by title."""

    binder = ParamBinder(repo.d)
    where = compose_filter_clause(criteria, binder=binder)
    sql = f"SELECT {_RETURN_COLUMNS} FROM {repo.table}{where.sql} ORDER BY title, id"

    rows = await repo.db.fetchall(sql, binder.params)
    logger.debug("jobs_listed", filters=list(where.conditions), count=len(rows))
    return [row_to_model(Job, row) for row in rows]


async def get(repo: Any, job_id: Any) -> JobDetail:
    """Fetch one job joined with its company."""

    binder = ParamBinder(repo.d)
    sql = (
        "SELECT c.handle, c.name, c.description, c.num_employees, c.logo_url, "
        "j.id, j.title, j.salary, j.equity "
        f"FROM {repo.companies_table} AS c "
        f"JOIN {repo.table} AS j ON j.company_handle = c.handle "
        f"WHERE j.id = {binder.bind(job_id)}"
    )
    row = await repo.db.fetchone(sql, binder.params)
    if row is None:
        logger.info("job_not_found", op="get", job_id=job_id)
        raise NotFoundError(f"No job: {job_id}", job_id=job_id)
    return row_to_job_detail(row)


async def update(repo: Any, job_id: Any, payload: UpdatePayload) -> Job:
    """Apply a partial update to one job and return the stored row."""

    binder = ParamBinder(repo.d)
    set_fragment = compose_set_clause(payload, repo.field_map, binder=binder)
    where = WhereBuilder(binder)
    where.add(f"id = {where.bind(job_id)}")

    sql = (
        f"UPDATE {repo.table} SET {set_fragment.sql}{where.build().sql} "
        f"RETURNING {_RETURN_COLUMNS}"
    )
    row = await repo.db.fetchone(sql, binder.params)
    if row is None:
        logger.info("job_not_found", op="update", job_id=job_id)
        raise NotFoundError(f"No job: {job_id}", job_id=job_id)
    logger.info("job_updated", job_id=job_id, fields=list(payload))
    return row_to_model(Job, row)


async def delete(repo: Any, job_id: Any) -> None:
    """Delete one job by id."""

    binder = ParamBinder(repo.d)
    sql = f"DELETE FROM {repo.table} WHERE id = {binder.bind(job_id)}"
    removed = await repo.db.execute(sql, binder.params)
    if removed == 0:
        logger.info("job_not_found", op="remove", job_id=job_id)
        raise NotFoundError(f"No job: {job_id}", job_id=job_id)
    logger.info("job_removed", job_id=job_id)
