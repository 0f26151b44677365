"""Public core API for clause composition and job persistence."""

from .criteria import CriteriaInput, JobCriteria, compose_filter_clause
from .errors import InvalidInputError, NotFoundError, SqlComposeError
from .log import get_logger, setup_logging
from .models import Company, Job, JobDetail, NewJob, row_to_job_detail, row_to_model, to_dict
from .query_builder import ClauseFragment, ParamBinder, WhereBuilder, compose_set_clause
from .repositories import JOB_FIELD_MAP, AsyncJobRepository

__all__ = [
    "AsyncJobRepository",
    "ClauseFragment",
    "Company",
    "CriteriaInput",
    "InvalidInputError",
    "JOB_FIELD_MAP",
    "Job",
    "JobCriteria",
    "JobDetail",
    "NewJob",
    "NotFoundError",
    "ParamBinder",
    "SqlComposeError",
    "WhereBuilder",
    "compose_filter_clause",
    "compose_set_clause",
    "get_logger",
    "row_to_job_detail",
    "row_to_model",
    "setup_logging",
    "to_dict",
]
