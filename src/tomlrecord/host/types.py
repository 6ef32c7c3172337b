# topmark:header:start
#
#   project      : TomlRecord
#   file         : types.py
#   file_relpath : src/tomlrecord/host/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host container types.

A record is a plain ``dict`` whose insertion order is the field declaration order.
Heterogeneous lists are plain ``list`` objects. Homogeneous numeric and boolean
arrays are returned as the typed vector subclasses below so callers (and the
writer) can tell ``[1, 2]`` read from an integer array apart from a list that
merely happens to hold integers.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, TypeAlias


class IntegerVector(list[int]):
    """Homogeneous vector of integers."""

    def __repr__(self) -> str:
        return f"IntegerVector({list.__repr__(self)})"


class FloatVector(list[float]):
    """Homogeneous vector of floats."""

    def __repr__(self) -> str:
        return f"FloatVector({list.__repr__(self)})"


class BooleanVector(list[bool]):
    """Homogeneous vector of booleans."""

    def __repr__(self) -> str:
        return f"BooleanVector({list.__repr__(self)})"


TemporalValue: TypeAlias = "date | time | datetime"

HostValue: TypeAlias = Any
"""Any value a record field may hold (records, lists, vectors, scalars, temporals)."""

Record: TypeAlias = "dict[str, HostValue]"
"""Ordered mapping of field name to host value."""

#: Typed vector classes, in the order the inference engine tests them.
VECTOR_TYPES: tuple[type[list[Any]], ...] = (IntegerVector, FloatVector, BooleanVector)

__all__ = [
    "BooleanVector",
    "FloatVector",
    "HostValue",
    "IntegerVector",
    "Record",
    "TemporalValue",
    "VECTOR_TYPES",
]
