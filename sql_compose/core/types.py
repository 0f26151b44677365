"""Shared core type aliases used across contracts, composers, and ports."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple, Union

Scalar = Union[str, int, float, bool, None]

FieldMap = Mapping[str, str]
UpdatePayload = Mapping[str, Scalar]

PositionalParams = List[Any]
FragmentParams = Tuple[Any, ...]
QueryParams = Optional[PositionalParams]

RowMapping = Mapping[str, Any]
Rows = List[RowMapping]
MaybeRow = Optional[RowMapping]
