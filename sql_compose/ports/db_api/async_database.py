"""Query-execution adapter over sync or async DB-API style connections.

Every call opens a cursor, runs one statement, reads what the caller needs
(rows or the affected-row count) and closes the cursor before returning.
No cursor outlives the call that opened it.
"""

from __future__ import annotations

import contextlib
from collections.abc import Awaitable, Callable
from typing import Any, Mapping, TypeVar

from ...core._async_utils import _close_cursor, _maybe_await
from ...core.dialects import Dialect
from ...core.types import MaybeRow, QueryParams, RowMapping, Rows

R = TypeVar("R")


class AsyncDatabase:
    """Runs composed SQL with positional parameters and returns mapped rows."""

    def __init__(self, conn: Any, dialect: Dialect):
        """Create async database adapter.

        Args:
            conn: Async (or sync) DB-API style connection object.
            dialect: Dialect matching the driver's placeholder style.
        """

        self.conn = conn
        self.dialect = dialect
        self._closed = False

    @contextlib.asynccontextmanager
    async def transaction(self):
        """Commit when the block succeeds, roll back when it raises."""

        conn = self._open_connection()
        try:
            yield
        except BaseException:
            await _maybe_await(conn.rollback())
            raise
        await _maybe_await(conn.commit())

    async def execute(self, sql: str, params: QueryParams = None) -> int:
        """Run a statement and return the number of affected rows."""

        return await self._run(sql, params, _rowcount)

    async def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow:
        """Run a query and return its first row as a mapping, if any."""

        async def first(cur: Any) -> MaybeRow:
            row = await _maybe_await(cur.fetchone())
            return None if row is None else _as_mapping(cur, row)

        return await self._run(sql, params, first)

    async def fetchall(self, sql: str, params: QueryParams = None) -> Rows:
        """Run a query and return every row as a mapping."""

        async def every(cur: Any) -> Rows:
            rows = await _maybe_await(cur.fetchall())
            return [_as_mapping(cur, row) for row in rows]

        return await self._run(sql, params, every)

    async def aclose(self) -> None:
        """Close the underlying connection. Later calls raise `RuntimeError`."""

        if self._closed:
            return
        self._closed = True
        await _maybe_await(self.conn.close())

    async def __aenter__(self) -> AsyncDatabase:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.aclose()

    def _open_connection(self) -> Any:
        if self._closed:
            raise RuntimeError("connection is closed")
        return self.conn

    async def _run(
        self,
        sql: str,
        params: QueryParams,
        consume: Callable[[Any], Awaitable[R]],
    ) -> R:
        cur = await _maybe_await(self._open_connection().cursor())
        try:
            if params is None:
                await _maybe_await(cur.execute(sql))
            else:
                await _maybe_await(cur.execute(sql, params))
            return await consume(cur)
        finally:
            await _close_cursor(cur)


async def _rowcount(cur: Any) -> int:
    return cur.rowcount


def _as_mapping(cursor: Any, row: Any) -> RowMapping:
    """Normalize a driver row to a column-name mapping.

    Tuple rows are keyed by `cursor.description`; mapping-like rows
    (`sqlite3.Row`, dict rows) are copied.
    """

    if isinstance(row, Mapping):
        return row
    if isinstance(row, (tuple, list)):
        desc = getattr(cursor, "description", None)
        if not desc:
            raise TypeError("Cursor has no description; cannot map tuple rows to dict.")
        return dict(zip((d[0] for d in desc), row, strict=True))
    try:
        return dict(row)
    except (TypeError, ValueError):
        raise TypeError(f"Unsupported row type: {type(row)}") from None
