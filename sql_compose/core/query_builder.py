"""SQL clause fragment builders for partial updates and filtered queries.

This module centralizes positional-parameter bookkeeping. A `ParamBinder`
owns the placeholder counter for one statement; composers append to it so
that fragments combined into a single statement number their placeholders
contiguously without any call site recomputing offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .contracts import DialectPort
from .dialects import PostgresDialect
from .errors import InvalidInputError
from .types import FieldMap, FragmentParams, PositionalParams, UpdatePayload


@dataclass(frozen=True)
class ClauseFragment:
    """Represents a compiled SQL fragment with its positional parameters.

    Attributes:
        sql: Fragment text ready to be spliced into a statement.
        params: Bound values; `params[i]` belongs to placeholder
            `first_index + i`.
        conditions: Bare condition strings in emission order.
        first_index: Placeholder index of the first bound value.
    """

    sql: str
    params: FragmentParams = ()
    conditions: tuple[str, ...] = ()
    first_index: int = 1

    @property
    def last_index(self) -> int:
        """Index of the last placeholder (`first_index - 1` when unbound)."""

        return self.first_index + len(self.params) - 1

    @property
    def is_empty(self) -> bool:
        return not self.conditions


_DEFAULT_DIALECT = PostgresDialect()


class ParamBinder:
    """Owns the running placeholder counter for one SQL statement."""

    def __init__(self, dialect: Optional[DialectPort] = None, *, start: int = 1):
        if start < 1:
            raise ValueError("Placeholder numbering starts at 1.")
        self.dialect: DialectPort = dialect if dialect is not None else _DEFAULT_DIALECT
        self._start = start
        self._values: PositionalParams = []

    def bind(self, value: Any) -> str:
        """Append one value and return the placeholder that refers to it."""

        self._values.append(value)
        return self.dialect.placeholder(self._start + len(self._values) - 1)

    @property
    def next_index(self) -> int:
        """Placeholder index the next `bind()` call will use."""

        return self._start + len(self._values)

    @property
    def params(self) -> PositionalParams:
        return list(self._values)

    def params_since(self, mark: int) -> FragmentParams:
        return tuple(self._values[mark:])

    def __len__(self) -> int:
        return len(self._values)


def _resolve_binder(
    binder: Optional[ParamBinder], dialect: Optional[DialectPort]
) -> ParamBinder:
    """Return `binder`, or a fresh one for `dialect`.

    A dialect passed alongside a binder must match the binder's own.
    """

    if binder is None:
        return ParamBinder(dialect)
    if dialect is not None and type(dialect) is not type(binder.dialect):
        raise ValueError(
            f"dialect {type(dialect).__name__} conflicts with the binder's "
            f"{type(binder.dialect).__name__}."
        )
    return binder


class WhereBuilder:
    """Accumulates conjunctive conditions and picks `WHERE` versus `AND`.

    The builder has two states: no condition emitted yet, and at least one
    emitted. The first condition added in the first state opens the clause
    with `WHERE`; every later condition continues it with `AND`. Pass
    `opened=True` when the base statement already carries its own `WHERE`.
    """

    def __init__(
        self,
        binder: Optional[ParamBinder] = None,
        *,
        dialect: Optional[DialectPort] = None,
        opened: bool = False,
    ):
        self.binder = _resolve_binder(binder, dialect)
        self._opened = opened
        self._first_index = self.binder.next_index
        self._mark = len(self.binder)
        self._conditions: List[str] = []
        self._rendered: List[str] = []

    @property
    def dialect(self) -> DialectPort:
        return self.binder.dialect

    @property
    def has_conditions(self) -> bool:
        return bool(self._conditions)

    def bind(self, value: Any) -> str:
        """Bind a value on the shared counter and return its placeholder."""

        return self.binder.bind(value)

    def add(self, condition: str) -> WhereBuilder:
        """Append one condition, choosing its keyword from current state."""

        keyword = "AND" if self._opened else "WHERE"
        self._opened = True
        self._conditions.append(condition)
        self._rendered.append(f" {keyword} {condition}")
        return self

    def build(self, *, leading_keyword: bool = True) -> ClauseFragment:
        """Freeze accumulated conditions into a fragment.

        Args:
            leading_keyword: Render ` WHERE a AND b` when true, or the bare
                conjunction `a AND b` for splicing after an existing keyword.

        Returns:
            Fragment with empty text and parameters when nothing was added.
        """

        conditions = tuple(self._conditions)
        if leading_keyword:
            sql = "".join(self._rendered)
        else:
            sql = " AND ".join(conditions)
        return ClauseFragment(
            sql=sql,
            params=self.binder.params_since(self._mark),
            conditions=conditions,
            first_index=self._first_index,
        )


def compose_set_clause(
    payload: UpdatePayload,
    field_map: Optional[FieldMap] = None,
    *,
    binder: Optional[ParamBinder] = None,
    dialect: Optional[DialectPort] = None,
) -> ClauseFragment:
    """Compile a partial-update payload into a `SET` column list.

    `{"firstName": "Aliya", "age": 32}` with `{"firstName": "first_name"}`
    becomes `"first_name"=$1, "age"=$2` bound to `("Aliya", 32)`.

    Args:
        payload: External field names mapped to new values. Insertion order
            decides placeholder order. `None` values null out the column.
        field_map: External field name to column name. Unmapped keys are used
            as column names verbatim.
        binder: Shared placeholder counter when the fragment is part of a
            larger statement. A fresh one starting at 1 otherwise.
        dialect: Dialect for quoting and placeholders. Must match the
            binder's dialect when both are given.

    Returns:
        Compiled fragment without the `SET` keyword.

    Raises:
        InvalidInputError: If `payload` has no keys.
        ValueError: If `dialect` conflicts with `binder.dialect`.
    """

    if not payload:
        raise InvalidInputError("No data to update")

    binder = _resolve_binder(binder, dialect)
    columns = field_map or {}
    first_index = binder.next_index
    mark = len(binder)

    conditions = tuple(
        f"{binder.dialect.q(columns.get(key) or key)}={binder.bind(value)}"
        for key, value in payload.items()
    )
    return ClauseFragment(
        sql=", ".join(conditions),
        params=binder.params_since(mark),
        conditions=conditions,
        first_index=first_index,
    )
