"""Job domain models and row mapping helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, is_dataclass
from typing import Any, Dict, Optional, Type, TypeVar

from .types import RowMapping

T = TypeVar("T")


@dataclass(frozen=True)
class NewJob:
    """Fields accepted when creating a job."""

    title: str
    company_handle: str
    salary: Optional[int] = None
    equity: Optional[Any] = None


@dataclass(frozen=True)
class Job:
    """Stored job row."""

    id: int
    title: str
    salary: Optional[int]
    equity: Optional[Any]
    company_handle: str


@dataclass(frozen=True)
class Company:
    """Company a job belongs to."""

    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class JobDetail:
    """Job with its company, as returned by a single-job lookup."""

    id: int
    title: str
    salary: Optional[int]
    equity: Optional[Any]
    company: Company


def to_dict(obj: Any) -> Dict[str, Any]:
    """Convert a dataclass instance into a plain dictionary."""

    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"{type(obj).__name__} is not a dataclass instance.")
    return asdict(obj)


def row_to_model(cls: Type[T], row: RowMapping) -> T:
    """Map one DB row mapping to a model instance, ignoring extra columns."""

    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    return cls(**{key: value for key, value in row.items() if key in names})


def row_to_job_detail(row: RowMapping) -> JobDetail:
    """Map one jobs-join-companies row to a `JobDetail`."""

    company = Company(
        handle=row["handle"],
        name=row["name"],
        description=row.get("description"),
        num_employees=row.get("num_employees"),
        logo_url=row.get("logo_url"),
    )
    return JobDetail(
        id=row["id"],
        title=row["title"],
        salary=row.get("salary"),
        equity=row.get("equity"),
        company=company,
    )
