# topmark:header:start
#
#   project      : TomlRecord
#   file         : inference.py
#   file_relpath : src/tomlrecord/codec/inference.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type inference between document nodes and host containers.

Document array to host container, first match wins:

1. every element is an ``Integer``             -> `IntegerVector`
2. every element is an ``Integer`` or ``Float`` -> `FloatVector` (integers widened)
3. every element is a ``Boolean``              -> `BooleanVector`
4. otherwise (including the empty array)       -> ``list`` of converted elements

Base tags of integers inside typed vectors are not kept.

Host value to document node:

* ``bool`` -> Boolean; ``int`` -> Integer; ``float`` -> Integer when integral and
  narrowing is enabled, else Float; ``str`` -> String; temporal -> Date/Time/DateTime;
* sentinel record -> the scalar it stands for; other mapping -> Table;
* ``list``/``tuple`` (typed vectors included) -> Array, element by element.

Anything else (``None``, sets, arbitrary objects, non-string keys, integers outside
the signed 64-bit range) is unsupported: skipped with a warning diagnostic, or
raised as `UnsupportedValueError` in strict mode.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from tomlrecord.codec.scalars import scalar_to_node
from tomlrecord.codec.sentinels import is_sentinel, sentinel_to_node
from tomlrecord.config.logging import get_logger
from tomlrecord.config.options import CodecOptions
from tomlrecord.core.errors import NestingDepthError, UnsupportedValueError
from tomlrecord.document.model import Array, Boolean, Float, Integer, Table, TableEntry
from tomlrecord.host.types import BooleanVector, FloatVector, IntegerVector

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.core.diagnostics import DiagnosticLog
    from tomlrecord.document.model import DocNode

logger: TomlRecordLogger = get_logger(__name__)


class ArrayKind(Enum):
    """Host container chosen for a document array."""

    INTEGER_VECTOR = "integer_vector"
    FLOAT_VECTOR = "float_vector"
    BOOLEAN_VECTOR = "boolean_vector"
    LIST = "list"


def classify_array(items: Sequence[DocNode]) -> ArrayKind:
    """Pick the host container for a document array (fixed precedence, first match wins)."""
    if not items:
        return ArrayKind.LIST
    if all(isinstance(n, Integer) for n in items):
        return ArrayKind.INTEGER_VECTOR
    if all(isinstance(n, (Integer, Float)) for n in items):
        return ArrayKind.FLOAT_VECTOR
    if all(isinstance(n, Boolean) for n in items):
        return ArrayKind.BOOLEAN_VECTOR
    return ArrayKind.LIST


def vector_from_nodes(
    items: Sequence[DocNode], kind: ArrayKind
) -> IntegerVector | FloatVector | BooleanVector:
    """Build the typed vector for an array already classified as ``kind``.

    Raises:
        ValueError: If ``kind`` is `ArrayKind.LIST`.
    """
    if kind is ArrayKind.INTEGER_VECTOR:
        return IntegerVector(n.value for n in items)  # type: ignore[union-attr]
    if kind is ArrayKind.FLOAT_VECTOR:
        return FloatVector(float(n.value) for n in items)  # type: ignore[union-attr]
    if kind is ArrayKind.BOOLEAN_VECTOR:
        return BooleanVector(n.value for n in items)  # type: ignore[union-attr]
    raise ValueError("Heterogeneous arrays have no typed vector")


def _join(path: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


class HostConverter:
    """Converts host values to document nodes.

    Args:
        options: Codec options (narrowing, depth limit, strict mode).
        diagnostics: Optional log that receives one warning per skipped value.
    """

    def __init__(
        self,
        options: CodecOptions | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.options: CodecOptions = options or CodecOptions()
        self.diagnostics: DiagnosticLog | None = diagnostics

    def unsupported(self, path: str, value: object, reason: str = "") -> None:
        """Report a value without a document mapping.

        Raises:
            UnsupportedValueError: In strict mode.
        """
        message: str = f"{path or '<root>'}: unsupported value of type {type(value).__name__}"
        if reason:
            message += f" ({reason})"
        if self.options.strict:
            raise UnsupportedValueError(message, path)
        logger.debug("Skipping %s", message)
        if self.diagnostics is not None:
            self.diagnostics.add_warning(message)

    def to_node(self, value: Any, path: str = "", depth: int = 0) -> DocNode | None:
        """Convert one host value; returns ``None`` when the value is skipped."""
        if is_sentinel(value):
            try:
                return sentinel_to_node(value)
            except ValueError as exc:
                self.unsupported(path, value, str(exc))
                return None
        if isinstance(value, Mapping):
            return self.to_table(value, path, depth + 1)
        if isinstance(value, (list, tuple)):
            return self.to_array(value, path, depth + 1)
        try:
            node: DocNode | None = scalar_to_node(
                value, narrow_integral_floats=self.options.narrow_integral_floats
            )
        except ValueError as exc:
            self.unsupported(path, value, str(exc))
            return None
        if node is None:
            self.unsupported(path, value)
        return node

    def _check_depth(self, path: str, depth: int) -> None:
        if depth > self.options.max_depth:
            raise NestingDepthError(path, self.options.max_depth)

    def to_table(self, record: Mapping[Any, Any], path: str = "", depth: int = 0) -> Table:
        """Convert a record to a table, keeping field order and skipping unsupported fields."""
        self._check_depth(path, depth)
        logger.trace("Converting record at %r (%d fields)", path, len(record))
        entries: list[TableEntry] = []
        for key, value in record.items():
            if not isinstance(key, str):
                self.unsupported(_join(path, repr(key)), key, "field names must be strings")
                continue
            node: DocNode | None = self.to_node(value, _join(path, key), depth)
            if node is not None:
                entries.append(TableEntry(key, node))
        return Table(tuple(entries))

    def to_array(self, values: Sequence[Any], path: str = "", depth: int = 0) -> Array:
        """Convert a list, tuple or typed vector element by element."""
        self._check_depth(path, depth)
        nodes: list[DocNode] = []
        for index, value in enumerate(values):
            node: DocNode | None = self.to_node(value, _join(path, index), depth)
            if node is not None:
                nodes.append(node)
        return Array(tuple(nodes))


def host_to_node(
    value: Any,
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> DocNode | None:
    """Convert a host value to a document node (``None`` if it is skipped)."""
    return HostConverter(options, diagnostics).to_node(value)


def record_to_document(
    record: Mapping[str, Any],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Table:
    """Convert a root host record to a document table in field declaration order.

    Raises:
        UnsupportedValueError: In strict mode, on the first unsupported value.
        NestingDepthError: If the record nests deeper than ``options.max_depth``.
    """
    return HostConverter(options, diagnostics).to_table(record)
