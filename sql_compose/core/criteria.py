"""Listing filters for jobs and their `WHERE` clause compilation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .contracts import DialectPort
from .errors import InvalidInputError
from .query_builder import ClauseFragment, ParamBinder, WhereBuilder


@dataclass(frozen=True)
class JobCriteria:
    """Optional predicates for the job listing query.

    Attributes:
        title: Case-insensitive substring of the job title.
        min_salary: Inclusive salary lower bound. `0` is a real bound.
        equity: When present, restricts results to jobs with zero equity.
    """

    title: Optional[str] = None
    min_salary: Optional[Any] = None
    equity: Optional[Any] = None

    _ALIASES = {"minSalary": "min_salary"}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> JobCriteria:
        """Build criteria from a query-string style mapping.

        Accepts `min_salary` or `minSalary`, not both.

        Raises:
            InvalidInputError: On unknown keys or a key given under both names.
        """

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name in normalized:
                raise InvalidInputError(f"Job filter {name!r} given more than once.")
            normalized[name] = value
        unknown = sorted(set(normalized) - {"title", "min_salary", "equity"})
        if unknown:
            raise InvalidInputError(f"Unknown job filter(s): {', '.join(unknown)}.")
        return cls(**normalized)


CriteriaInput = Union[JobCriteria, Mapping[str, Any], None]


def compose_filter_clause(
    criteria: CriteriaInput,
    *,
    binder: Optional[ParamBinder] = None,
    dialect: Optional[DialectPort] = None,
    opened: bool = False,
) -> ClauseFragment:
    """Compile job filters into a conjunctive `WHERE` fragment.

    Filter values are not validated; only the SQL shape and the
    placeholder-to-value correspondence are guaranteed.

    Args:
        criteria: Filters to apply, a mapping of them, or `None`.
        binder: Shared placeholder counter for the enclosing statement.
        dialect: Dialect for rendering; must match the binder's when both are given.
        opened: The base statement already has a `WHERE`; continue with `AND`.

    Returns:
        ` WHERE ...` fragment, or an empty fragment when no filter applies.
    """

    where = WhereBuilder(binder, dialect=dialect, opened=opened)
    if criteria is None:
        return where.build()
    if not isinstance(criteria, JobCriteria):
        criteria = JobCriteria.from_mapping(criteria)

    if criteria.title:
        where.add(where.dialect.substring_match("title", where.bind(criteria.title)))

    if criteria.min_salary is not None:
        where.add(f"salary >= {where.bind(criteria.min_salary)}")

    if criteria.equity is not None:
        # Inlined constant: no placeholder consumed.
        where.add("equity = 0")

    return where.build()
