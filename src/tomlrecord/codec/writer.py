# topmark:header:start
#
#   project      : TomlRecord
#   file         : writer.py
#   file_relpath : src/tomlrecord/codec/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered writer: host record tree to TOML text.

TOML requires every ``key = value`` line of a table to come before any header of a
nested table. The writer therefore partitions each table first, then emits it in
three passes, keeping declaration order inside each pass:

1. assignments: scalars, sentinels (already resolved to scalars) and inline arrays;
2. nested tables, each as a ``[path.name]`` section, recursively;
3. arrays of tables, one ``[[path.name]]`` block per element, recursively.

Arrays emitted as assignments render inline (``[1, 2, 3]``); tables found inside
them render as inline tables (``{ a = 1 }``). Strings inside inline containers are
always single-line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tomlrecord.codec.inference import record_to_document
from tomlrecord.codec.scalars import format_key, format_key_path, format_scalar
from tomlrecord.config.logging import get_logger
from tomlrecord.config.options import CodecOptions
from tomlrecord.core.errors import NestingDepthError
from tomlrecord.document.model import Array, Table

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.core.diagnostics import DiagnosticLog
    from tomlrecord.document.model import DocNode, TableEntry

logger: TomlRecordLogger = get_logger(__name__)


@dataclass(frozen=True)
class TableSections:
    """A table's entries split into the three emission groups, each in declaration order."""

    assignments: tuple[TableEntry, ...]
    tables: tuple[TableEntry, ...]
    table_arrays: tuple[TableEntry, ...]


def is_table_array(node: DocNode) -> bool:
    """Return True for a non-empty array whose elements are all tables."""
    return isinstance(node, Array) and len(node) > 0 and all(isinstance(n, Table) for n in node)


def partition_table(table: Table) -> TableSections:
    """Split a table into assignments, nested tables and arrays of tables."""
    assignments: list[TableEntry] = []
    tables: list[TableEntry] = []
    table_arrays: list[TableEntry] = []
    for entry in table:
        if isinstance(entry.node, Table):
            tables.append(entry)
        elif is_table_array(entry.node):
            table_arrays.append(entry)
        else:
            assignments.append(entry)
    return TableSections(tuple(assignments), tuple(tables), tuple(table_arrays))


class DocumentWriter:
    """Renders a document table as TOML text.

    Args:
        options: Codec options (string style, section spacing, depth limit).
    """

    def __init__(self, options: CodecOptions | None = None) -> None:
        self.options: CodecOptions = options or CodecOptions()

    def write(self, table: Table) -> str:
        """Render a root table.

        Returns:
            The TOML text, ending with a single newline; ``""`` for an empty table.
        """
        lines: list[str] = []
        self._emit_table(table, [], 0, lines)
        if not lines:
            return ""
        return "\n".join(lines) + "\n"

    def _check_depth(self, path: list[str], depth: int) -> None:
        if depth > self.options.max_depth:
            raise NestingDepthError(".".join(path), self.options.max_depth)

    def _header(self, lines: list[str], header: str) -> None:
        if lines and self.options.section_spacing:
            lines.append("")
        lines.append(header)

    def _emit_table(self, table: Table, path: list[str], depth: int, lines: list[str]) -> None:
        self._check_depth(path, depth)
        sections: TableSections = partition_table(table)
        logger.trace(
            "Writing %r: %d assignments, %d tables, %d arrays of tables",
            ".".join(path),
            len(sections.assignments),
            len(sections.tables),
            len(sections.table_arrays),
        )

        for entry in sections.assignments:
            value: str = self.render_value(entry.node, path + [entry.key], depth)
            lines.append(f"{format_key(entry.key)} = {value}")

        for entry in sections.tables:
            child_path: list[str] = path + [entry.key]
            self._header(lines, f"[{format_key_path(child_path)}]")
            self._emit_table(entry.node, child_path, depth + 1, lines)  # type: ignore[arg-type]

        for entry in sections.table_arrays:
            child_path = path + [entry.key]
            for element in entry.node:  # type: ignore[union-attr]
                self._header(lines, f"[[{format_key_path(child_path)}]]")
                self._emit_table(element, child_path, depth + 1, lines)

    def render_value(self, node: DocNode, path: list[str], depth: int, inline: bool = False) -> str:
        """Render the right-hand side of an assignment."""
        if isinstance(node, Array):
            self._check_depth(path, depth + 1)
            items: list[str] = [self.render_value(n, path, depth + 1, inline=True) for n in node]
            return f"[{', '.join(items)}]"
        if isinstance(node, Table):
            self._check_depth(path, depth + 1)
            if not len(node):
                return "{}"
            pairs: list[str] = [
                f"{format_key(e.key)} = "
                + self.render_value(e.node, path + [e.key], depth + 1, inline=True)
                for e in node
            ]
            return "{ " + ", ".join(pairs) + " }"
        return format_scalar(node, multiline_strings=self.options.multiline_strings and not inline)


def write_document(table: Table, options: CodecOptions | None = None) -> str:
    """Render a document table as TOML text."""
    return DocumentWriter(options).write(table)


def write_record(
    record: Mapping[str, Any],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> str:
    """Render a host record as TOML text.

    Unsupported values are skipped (and reported to ``diagnostics``) unless
    ``options.strict`` is set.
    """
    table: Table = record_to_document(record, options, diagnostics)
    return DocumentWriter(options).write(table)
