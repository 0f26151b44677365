"""Internal helpers for driving sync and async DB-API objects alike."""

from __future__ import annotations

import inspect
from typing import Any


async def _maybe_await(value: Any) -> Any:
    """Await awaitables and return non-awaitable values unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _close_cursor(cur: Any) -> None:
    """Close a cursor when it exposes `close()`, awaiting async drivers."""
    close = getattr(cur, "close", None)
    if callable(close):
        await _maybe_await(close())
