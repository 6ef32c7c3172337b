# topmark:header:start
#
#   project      : TomlRecord
#   file         : parser.py
#   file_relpath : src/tomlrecord/document/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build a positioned document tree from TOML text using `tomlkit`.

`tomlkit` does the lexing and validation. Its container ``body`` keeps every item
(including whitespace and comments) in source order, and rendering an item gives
back its exact source text. The adapter walks the body once, counting newlines in
the rendered text of each item to assign a 1-based source line (and the column of
the first key character) to every key.

Layout quirks handled here:
    * Super tables (implicit parents of ``[a.b]`` and of dotted keys ``a.b = 1``)
      have no header of their own; they take the position of their first child.
    * Out-of-order tables (``[a]``, ``[b]``, ``[a.c]``) appear more than once in
      ``tomlkit``'s body under the same key; their entries are merged and the
      table keeps its first position.
    * Entries of inline tables and elements of arrays get no position; the reader
      keeps them in iteration order.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit import items as tk
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.exceptions import TOMLKitError

from tomlrecord.config.logging import get_logger
from tomlrecord.core.errors import MalformedInputError
from tomlrecord.document.model import (
    Array,
    BaseTag,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    Offset,
    Position,
    String,
    Table,
    TableEntry,
    Time,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.document.model import DocNode

logger: TomlRecordLogger = get_logger(__name__)

_FRACTION_RE: Final[re.Pattern[str]] = re.compile(r"\.(\d+)")

_BASE_BY_PREFIX: Final[dict[str, BaseTag]] = {
    "0x": BaseTag.HEX,
    "0o": BaseTag.OCTAL,
    "0b": BaseTag.BINARY,
}


def parse_document(text: str) -> Table:
    """Parse TOML text into a positioned document tree.

    Args:
        text: TOML source text.

    Returns:
        The root table.

    Raises:
        MalformedInputError: If `tomlkit` rejects the text.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise MalformedInputError(str(exc), line=exc.line, column=exc.col) from exc
    except TOMLKitError as exc:
        # e.g. KeyAlreadyPresent for redefined tables
        raise MalformedInputError(str(exc)) from exc

    root: Table = _PositionTracker().container(doc.body, Position(1, 1))
    logger.trace("Parsed document with %d top-level keys", len(root))
    return root


def base_of_literal(raw: str) -> BaseTag:
    """Return the base tag of an integer literal from its source text."""
    prefix: str = raw.lstrip("+-")[:2].lower()
    return _BASE_BY_PREFIX.get(prefix, BaseTag.DECIMAL)


def nanoseconds_of_literal(raw: str) -> int:
    """Return the fractional seconds of a time literal as nanoseconds.

    Digits beyond nanosecond precision are dropped.
    """
    match = _FRACTION_RE.search(raw)
    if match is None:
        return 0
    return int(match.group(1)[:9].ljust(9, "0"))


def _offset_of(value: datetime) -> Offset | None:
    delta: timedelta | None = value.utcoffset()
    if delta is None:
        return None
    return Offset(int(delta.total_seconds()) // 60)


class _PositionTracker:
    """Walks a `tomlkit` container body in source order while tracking the line."""

    def __init__(self) -> None:
        self._line: int = 1

    def _advance(self, text: str) -> None:
        self._line += text.count("\n")

    def _here(self, indent: str) -> Position:
        line: int = self._line + indent.count("\n")
        column: int = len(indent.rsplit("\n", 1)[-1]) + 1
        return Position(line, column)

    def container(
        self,
        body: Iterable[tuple[tk.Key | None, tk.Item]],
        position: Position | None,
    ) -> Table:
        merged: dict[str, DocNode] = {}
        for key, item in body:
            if key is None or isinstance(item, (tk.Whitespace, tk.Comment, tk.Null)):
                self._advance(item.as_string())
                continue

            node: DocNode
            if isinstance(item, tk.AoT):
                node = self._array_of_tables(item)
            elif isinstance(item, tk.Table):
                node = self._table(item)
            else:
                trivia: tk.Trivia = item.trivia
                node = self.value(item, self._here(trivia.indent))
                self._advance(
                    trivia.indent
                    + item.as_string()
                    + trivia.comment_ws
                    + trivia.comment
                    + trivia.trail
                )

            name: str = key.key
            if name in merged:
                merged[name] = _merge(name, merged[name], node)
            else:
                merged[name] = node

        if position is None:
            position = _first_position(merged.values())
        return Table(tuple(TableEntry(k, n) for k, n in merged.items()), position=position)

    def _table(self, table: tk.Table) -> Table:
        if table.is_super_table():
            return self.container(table.value.body, None)

        trivia: tk.Trivia = table.trivia
        header: Position = self._here(trivia.indent)
        self._advance(trivia.indent + trivia.comment_ws + trivia.comment + trivia.trail)
        return self.container(table.value.body, header)

    def _array_of_tables(self, aot: tk.AoT) -> Array:
        tables: tuple[Table, ...] = tuple(self._table(t) for t in aot.body)
        return Array(tables, position=_first_position(tables))

    def value(self, item: tk.Item, position: Position | None) -> DocNode:
        """Convert a `tomlkit` value item (anything but a standard table) to a node."""
        if isinstance(item, tk.Bool):
            return Boolean(bool(item.value), position=position)
        if isinstance(item, tk.Integer):
            return Integer(int(item), base=base_of_literal(item.as_string()), position=position)
        if isinstance(item, tk.Float):
            return Float(float(item), position=position)
        if isinstance(item, tk.String):
            return String(str(item), multiline=item.type.is_multiline(), position=position)
        if isinstance(item, tk.DateTime):
            raw: str = item.as_string()
            return DateTime(
                Date(item.year, item.month, item.day),
                Time(item.hour, item.minute, item.second, nanoseconds_of_literal(raw)),
                _offset_of(item),
                position=position,
            )
        if isinstance(item, tk.Date):
            return Date(item.year, item.month, item.day, position=position)
        if isinstance(item, tk.Time):
            return Time(
                item.hour,
                item.minute,
                item.second,
                nanoseconds_of_literal(item.as_string()),
                position=position,
            )
        if isinstance(item, tk.Array):
            return Array(tuple(self.value(v, None) for v in item), position=position)
        if isinstance(item, tk.InlineTable):
            pairs: list[TableEntry] = [
                TableEntry(k.key, self.value(v, None))
                for k, v in item.value.body
                if k is not None and not isinstance(v, (tk.Whitespace, tk.Comment, tk.Null))
            ]
            return Table(tuple(pairs), position=position)
        if isinstance(item, tk.Table):
            # standard table nested inside an array value cannot occur in parsed text
            return self.container(item.value.body, position)
        raise MalformedInputError(f"Unexpected TOML item of type {type(item).__name__}")


def _first_position(nodes: Iterable[DocNode]) -> Position | None:
    positions: list[Position] = [n.position for n in nodes if n.position is not None]
    return min(positions) if positions else None


def _merge(name: str, first: DocNode, second: DocNode) -> DocNode:
    """Merge two body entries that share a key (out-of-order tables)."""
    if isinstance(first, Table) and isinstance(second, Table):
        merged: dict[str, Any] = {e.key: e.node for e in first.entries}
        for entry in second.entries:
            if entry.key in merged:
                merged[entry.key] = _merge(entry.key, merged[entry.key], entry.node)
            else:
                merged[entry.key] = entry.node
        position: Position | None = _first_position((first, second))
        return Table(tuple(TableEntry(k, n) for k, n in merged.items()), position=position)
    if isinstance(first, Array) and isinstance(second, Array):
        return Array(first.items + second.items, position=_first_position((first, second)))
    raise MalformedInputError(f"Key {name!r} is defined more than once")
