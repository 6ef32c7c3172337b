# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed TOML document tree and the adapter that builds it from ``tomlkit``."""

from __future__ import annotations

from tomlrecord.document.model import (
    Array,
    BaseTag,
    Boolean,
    Date,
    DateTime,
    DocNode,
    Float,
    Integer,
    Offset,
    Position,
    String,
    Table,
    TableEntry,
    Time,
)

__all__ = [
    "Array",
    "BaseTag",
    "Boolean",
    "Date",
    "DateTime",
    "DocNode",
    "Float",
    "Integer",
    "Offset",
    "Position",
    "String",
    "Table",
    "TableEntry",
    "Time",
]
