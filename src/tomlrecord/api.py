# topmark:header:start
#
#   project      : TomlRecord
#   file         : api.py
#   file_relpath : src/tomlrecord/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points of TomlRecord.

Read direction:
    * `parse_document`: TOML text -> document tree (via `tomlkit`).
    * `read_document`: document tree -> host record.
    * `loads` / `load`: TOML text / file -> host record.

Write direction:
    * `to_document`: host record -> document tree.
    * `write_document`: document tree -> TOML text.
    * `dumps` / `dump`: host record -> TOML text / file.

All functions accept optional [`CodecOptions`][tomlrecord.config.options.CodecOptions]
and an optional [`DiagnosticLog`][tomlrecord.core.diagnostics.DiagnosticLog] that
collects a warning for every skipped value.

Fatal failures raise a [`TomlRecordError`][tomlrecord.core.errors.TomlRecordError]
subclass; no partial output is produced. `dump` renders the whole document in memory
before writing it atomically.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tomlrecord.codec.inference import record_to_document
from tomlrecord.codec.reader import read_document as _read_document
from tomlrecord.codec.writer import write_document as _write_document
from tomlrecord.config.logging import get_logger
from tomlrecord.constants import TOML_ENCODING
from tomlrecord.core.errors import InputError
from tomlrecord.core.files import atomic_write_text
from tomlrecord.document.parser import parse_document

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.config.options import CodecOptions
    from tomlrecord.core.diagnostics import DiagnosticLog
    from tomlrecord.document.model import Table
    from tomlrecord.host.types import Record

logger: TomlRecordLogger = get_logger(__name__)

__all__ = [
    "dump",
    "dumps",
    "load",
    "loads",
    "parse_document",
    "read_document",
    "to_document",
    "write_document",
]


def _require_record(record: object) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise TypeError(f"Root value must be a mapping, got {type(record).__name__}")
    return record


# --- Read direction ---


def read_document(
    table: Table,
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Record:
    """Convert a parsed document tree to a host record in source declaration order.

    Args:
        table: Root table, as returned by `parse_document`.
        options: Codec options.
        diagnostics: Optional log of skipped nodes.

    Returns:
        The host record.
    """
    return _read_document(table, options, diagnostics)


def loads(
    text: str,
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Record:
    """Parse TOML text into a host record.

    Empty (or whitespace-only) text yields an empty record and logs a warning.

    Raises:
        MalformedInputError: If the text is not valid TOML.
        NestingDepthError: If the document nests deeper than ``options.max_depth``.
    """
    if not text.strip():
        logger.warning("Empty TOML input: returning an empty record")
        return {}
    return _read_document(parse_document(text), options, diagnostics)


def load(
    path: str | os.PathLike[str],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Record:
    """Read a TOML file into a host record.

    Raises:
        InputError: If the file does not exist or cannot be read as UTF-8.
        MalformedInputError: If the file is not valid TOML.
    """
    source = Path(path)
    try:
        text: str = source.read_text(encoding=TOML_ENCODING)
    except FileNotFoundError as exc:
        raise InputError(f"File not found: {source}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read {source}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), source)
    return loads(text, options, diagnostics)


# --- Write direction ---


def to_document(
    record: Mapping[str, Any],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> Table:
    """Convert a host record to a document tree, keeping field order.

    Raises:
        TypeError: If ``record`` is not a mapping.
        UnsupportedValueError: In strict mode, on the first unsupported value.
    """
    return record_to_document(_require_record(record), options, diagnostics)


def write_document(table: Table, options: CodecOptions | None = None) -> str:
    """Render a document tree as TOML text."""
    return _write_document(table, options)


def dumps(
    record: Mapping[str, Any],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> str:
    """Render a host record as TOML text.

    An empty record renders as an empty document and logs a warning.

    Raises:
        TypeError: If ``record`` is not a mapping.
        UnsupportedValueError: In strict mode, on the first unsupported value.
        NestingDepthError: If the record nests deeper than ``options.max_depth``.
    """
    if not _require_record(record):
        logger.warning("Empty record: writing an empty document")
    return _write_document(record_to_document(record, options, diagnostics), options)


def dump(
    record: Mapping[str, Any],
    path: str | os.PathLike[str],
    options: CodecOptions | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> None:
    """Write a host record to a TOML file.

    The text is rendered completely before the destination is touched, then written
    to a temporary file in the same directory and moved into place.

    Raises:
        TypeError: If ``record`` is not a mapping.
        OutputError: If the destination cannot be written.
    """
    text: str = dumps(record, options, diagnostics)
    atomic_write_text(path, text, TOML_ENCODING)
