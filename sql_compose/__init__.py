"""SQL clause composition for partial updates and filtered job listings."""

from .core import (
    JOB_FIELD_MAP,
    AsyncJobRepository,
    ClauseFragment,
    Company,
    InvalidInputError,
    Job,
    JobCriteria,
    JobDetail,
    NewJob,
    NotFoundError,
    ParamBinder,
    SqlComposeError,
    WhereBuilder,
    compose_filter_clause,
    compose_set_clause,
    setup_logging,
)
from .ports import AsyncDatabase, Dialect, PostgresDialect, SQLiteDialect

__version__ = "0.1.0"

__all__ = [
    "AsyncDatabase",
    "AsyncJobRepository",
    "ClauseFragment",
    "Company",
    "Dialect",
    "InvalidInputError",
    "JOB_FIELD_MAP",
    "Job",
    "JobCriteria",
    "JobDetail",
    "NewJob",
    "NotFoundError",
    "ParamBinder",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlComposeError",
    "WhereBuilder",
    "compose_filter_clause",
    "compose_set_clause",
    "setup_logging",
]
