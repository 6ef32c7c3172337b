# topmark:header:start
#
#   project      : TomlRecord
#   file         : model.py
#   file_relpath : src/tomlrecord/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document tree for TOML values.

Each node is an immutable dataclass. Nodes produced by the parser adapter carry a
source [`Position`][tomlrecord.document.model.Position]; nodes synthesized from host
values carry none. Positions never take part in equality, so a parsed tree and a
synthesized tree holding the same values compare equal.

Sections:
    * Position: 1-based (line, column) source location.
    * BaseTag: the base an integer literal was written in.
    * Scalar nodes: String, Integer, Float, Boolean, Date, Time, DateTime (+ Offset).
    * Containers: Array, Table (+ TableEntry).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Final, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

#: Inclusive bounds of a TOML integer (signed 64-bit).
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


@dataclass(frozen=True, order=True)
class Position:
    """Source location of a node, 1-based.

    `Position.LAST` is assigned to nodes without source information; it sorts after
    every real position.
    """

    line: int
    column: int = 1

    LAST: ClassVar[Position]

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


Position.LAST = Position(sys.maxsize, sys.maxsize)


class BaseTag(Enum):
    """Base in which an integer literal was written."""

    DECIMAL = "dec"
    HEX = "hex"
    OCTAL = "oct"
    BINARY = "bin"

    @property
    def radix(self) -> int:
        """Numeric radix of the base."""
        return {
            BaseTag.DECIMAL: 10,
            BaseTag.HEX: 16,
            BaseTag.OCTAL: 8,
            BaseTag.BINARY: 2,
        }[self]


@dataclass(frozen=True)
class String:
    """A string value; ``multiline`` records that it was written as a multi-line literal."""

    value: str
    multiline: bool = False
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Integer:
    """A signed 64-bit integer with the base it was written in."""

    value: int
    base: BaseTag = BaseTag.DECIMAL
    position: Position | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer value must be an int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer value {self.value} outside the signed 64-bit range")


@dataclass(frozen=True)
class Float:
    """A 64-bit float; may be ``inf``, ``-inf`` or ``nan``."""

    value: float
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Boolean:
    """A boolean value."""

    value: bool
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Date:
    """A local date."""

    year: int
    month: int
    day: int
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Time:
    """A local time of day with nanosecond precision."""

    hour: int
    minute: int
    second: int
    nanosecond: int = 0
    position: Position | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.nanosecond < 1_000_000_000:
            raise ValueError(f"nanosecond out of range: {self.nanosecond}")


@dataclass(frozen=True)
class Offset:
    """A UTC offset expressed in minutes (east of UTC is positive)."""

    minutes: int

    def __post_init__(self) -> None:
        # TOML offsets are at most +/-23:59
        if not -(24 * 60) < self.minutes < 24 * 60:
            raise ValueError(f"offset out of range: {self.minutes} minutes")


@dataclass(frozen=True)
class DateTime:
    """A date and time, with an optional UTC offset (``None`` means naive/local)."""

    date: Date
    time: Time
    offset: Offset | None = None
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Array:
    """An ordered, possibly heterogeneous, sequence of nodes."""

    items: tuple[DocNode, ...] = ()
    position: Position | None = field(default=None, compare=False)

    def __iter__(self) -> Iterator[DocNode]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class TableEntry:
    """One ``key = node`` pair of a table."""

    key: str
    node: DocNode


@dataclass(frozen=True)
class Table:
    """An ordered mapping of unique keys to nodes.

    Entries keep their insertion order; the reader re-sorts them by position.

    Raises:
        ValueError: If two entries share a key.
    """

    entries: tuple[TableEntry, ...] = ()
    position: Position | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for entry in self.entries:
            if entry.key in seen:
                raise ValueError(f"Duplicate key in table: {entry.key!r}")
            seen.add(entry.key)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, DocNode]],
        position: Position | None = None,
    ) -> Table:
        """Build a table from ``(key, node)`` pairs, keeping their order."""
        return cls(tuple(TableEntry(k, n) for k, n in pairs), position=position)

    def keys(self) -> list[str]:
        """Return the keys in insertion order."""
        return [e.key for e in self.entries]

    def get(self, key: str) -> DocNode | None:
        """Return the node stored under ``key``, or None."""
        for entry in self.entries:
            if entry.key == key:
                return entry.node
        return None

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DocNode = Union[Table, Array, String, Integer, Float, Boolean, Date, Time, DateTime]
"""Any node of the document tree."""

#: Node classes that hold a single scalar value.
SCALAR_NODE_TYPES: Final[tuple[type, ...]] = (String, Integer, Float, Boolean, Date, Time, DateTime)


def position_of(node: DocNode) -> Position:
    """Return the node's source position, or `Position.LAST` when it has none."""
    return node.position if node.position is not None else Position.LAST
