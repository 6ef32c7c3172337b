# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord package.

TomlRecord converts TOML documents to ordered host records (plain ``dict`` trees
with typed vectors and sentinel records) and back, keeping field order, integer
bases, the integer/float distinction, float formatting and date/time offsets.

Typical use::

    import tomlrecord

    record = tomlrecord.loads(text)
    text = tomlrecord.dumps(record)
"""

from __future__ import annotations

from tomlrecord.api import (
    dump,
    dumps,
    load,
    loads,
    parse_document,
    read_document,
    to_document,
    write_document,
)
from tomlrecord.codec.sentinels import (
    is_formatted_integer,
    is_offset_datetime,
    is_sentinel,
    make_formatted_integer,
    make_offset_datetime,
)
from tomlrecord.config.options import CodecOptions
from tomlrecord.core.diagnostics import DiagnosticLog
from tomlrecord.core.errors import (
    ErrorCategory,
    InputError,
    MalformedInputError,
    NestingDepthError,
    OutputError,
    TomlRecordError,
    UnsupportedValueError,
)
from tomlrecord.host.types import BooleanVector, FloatVector, IntegerVector

__all__ = [
    "BooleanVector",
    "CodecOptions",
    "DiagnosticLog",
    "ErrorCategory",
    "FloatVector",
    "InputError",
    "IntegerVector",
    "MalformedInputError",
    "NestingDepthError",
    "OutputError",
    "TomlRecordError",
    "UnsupportedValueError",
    "dump",
    "dumps",
    "is_formatted_integer",
    "is_offset_datetime",
    "is_sentinel",
    "load",
    "loads",
    "make_formatted_integer",
    "make_offset_datetime",
    "parse_document",
    "read_document",
    "to_document",
    "write_document",
]
