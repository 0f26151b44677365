"""Core port contracts used by adapters, composers, and repositories."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import List, Protocol

from .types import MaybeRow, QueryParams, RowMapping


class DialectPort(Protocol):
    """Dialect behavior required by clause composition."""

    paramstyle: str

    def q(self, ident: str) -> str: ...

    def placeholder(self, index: int) -> str: ...

    def substring_match(self, column: str, placeholder: str) -> str: ...


class AsyncDatabasePort(Protocol):
    """Async query-execution behavior required by the job repository."""

    dialect: DialectPort

    def transaction(self) -> AbstractAsyncContextManager[None]: ...

    async def execute(self, sql: str, params: QueryParams = None) -> int: ...

    async def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow: ...

    async def fetchall(self, sql: str, params: QueryParams = None) -> List[RowMapping]: ...
