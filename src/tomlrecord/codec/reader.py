# topmark:header:start
#
#   project      : TomlRecord
#   file         : reader.py
#   file_relpath : src/tomlrecord/codec/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Order-preserving reader: document tree to host record tree.

For every table the reader collects ``(key, node, position)`` triples, gives nodes
without a position `Position.LAST`, and stable-sorts by ``(line, column)``. The
resulting ``dict`` therefore lists fields in source declaration order, ties keeping
the table's iteration order.

Node mapping:

* Table -> ``dict``; Array -> typed vector or ``list`` (see `tomlrecord.codec.inference`);
* decimal Integer -> ``int``; hex/octal/binary Integer -> formatted-integer sentinel;
* Float -> ``float``; Boolean -> ``bool``; String -> ``str``;
* Date -> ``date``; Time -> ``time``; naive DateTime -> ``datetime``;
* DateTime with an offset -> offset-datetime sentinel around a naive ``datetime``.

Stdlib temporal objects hold microseconds: digits beyond that are truncated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tomlrecord.codec.inference import ArrayKind, classify_array, vector_from_nodes
from tomlrecord.codec.scalars import node_to_temporal
from tomlrecord.codec.sentinels import node_to_sentinel
from tomlrecord.config.logging import get_logger
from tomlrecord.config.options import CodecOptions
from tomlrecord.core.errors import NestingDepthError, UnsupportedValueError
from tomlrecord.document.model import (
    Array,
    BaseTag,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    String,
    Table,
    Time,
    position_of,
)

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.core.diagnostics import DiagnosticLog
    from tomlrecord.document.model import DocNode, Position, TableEntry
    from tomlrecord.host.types import HostValue, Record

logger: TomlRecordLogger = get_logger(__name__)

#: Marker returned by `read_node` for nodes that are skipped.
_SKIPPED: Any = object()


class OrderedReader:
    """Converts a document tree to host values.

    Args:
        options: Codec options (depth limit, strict mode).
        diagnostics: Optional log that receives one warning per skipped node.
    """

    def __init__(
        self,
        options: CodecOptions | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.options: CodecOptions = options or CodecOptions()
        self.diagnostics: DiagnosticLog | None = diagnostics

    def _check_depth(self, path: str, depth: int) -> None:
        if depth > self.options.max_depth:
            raise NestingDepthError(path, self.options.max_depth)

    def ordered_entries(self, table: Table) -> list[TableEntry]:
        """Return the table's entries sorted by source position (stable)."""
        keyed: list[tuple[Position, TableEntry]] = [(position_of(e.node), e) for e in table]
        keyed.sort(key=lambda pair: pair[0])
        return [entry for _, entry in keyed]

    def read_table(self, table: Table, path: str = "", depth: int = 0) -> Record:
        """Convert a table to a ``dict`` whose field order is the source order."""
        self._check_depth(path, depth)
        record: Record = {}
        for entry in self.ordered_entries(table):
            child_path: str = f"{path}.{entry.key}" if path else entry.key
            value: HostValue = self.read_node(entry.node, child_path, depth)
            if value is not _SKIPPED:
                record[entry.key] = value
        logger.trace("Read table %r with %d fields", path, len(record))
        return record

    def read_array(self, array: Array, path: str = "", depth: int = 0) -> Any:
        """Convert an array to a typed vector or to a list of converted elements."""
        self._check_depth(path, depth)
        kind: ArrayKind = classify_array(array.items)
        if kind is not ArrayKind.LIST:
            return vector_from_nodes(array.items, kind)
        out: list[HostValue] = []
        for index, node in enumerate(array.items):
            value: HostValue = self.read_node(node, f"{path}[{index}]", depth)
            if value is not _SKIPPED:
                out.append(value)
        return out

    def read_node(self, node: DocNode, path: str = "", depth: int = 0) -> HostValue:
        """Convert any node to its host value."""
        if isinstance(node, Table):
            return self.read_table(node, path, depth + 1)
        if isinstance(node, Array):
            return self.read_array(node, path, depth + 1)
        if isinstance(node, Integer):
            if node.base is BaseTag.DECIMAL:
                return node.value
            return node_to_sentinel(node)
        if isinstance(node, Float):
            return node.value
        if isinstance(node, Boolean):
            return node.value
        if isinstance(node, String):
            return node.value
        if isinstance(node, DateTime) and node.offset is not None:
            return node_to_sentinel(node)
        if isinstance(node, (Date, Time, DateTime)):
            return node_to_temporal(node).to_host()
        return self._unsupported(path, node)

    def _unsupported(self, path: str, node: object) -> object:
        message: str = f"{path or '<root>'}: unsupported node of type {type(node).__name__}"
        if self.options.strict:
            raise UnsupportedValueError(message, path)
        logger.debug("Skipping %s", message)
        if self.diagnostics is not None:
            self.diagnostics.add_warning(message)
        return _SKIPPED


def read_document(
    table: Table,
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Record:
    """Convert a root document table to a host record in source declaration order.

    Raises:
        NestingDepthError: If the tree nests deeper than ``options.max_depth``.
    """
    return OrderedReader(options, diagnostics).read_table(table)
