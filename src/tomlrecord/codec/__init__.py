# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The TOML <-> host record codec.

Modules, leaves first:
    * `scalars`: leaf formatting and host scalar conversion.
    * `sentinels`: formatted-integer and offset-datetime sentinel records.
    * `inference`: array classification and host value to node conversion.
    * `reader`: order-preserving document to record conversion.
    * `writer`: three-pass record to TOML text rendering.
"""

from __future__ import annotations

from tomlrecord.codec.inference import ArrayKind, classify_array, host_to_node, record_to_document
from tomlrecord.codec.reader import OrderedReader, read_document
from tomlrecord.codec.writer import DocumentWriter, partition_table, write_document, write_record

__all__ = [
    "ArrayKind",
    "DocumentWriter",
    "OrderedReader",
    "classify_array",
    "host_to_node",
    "partition_table",
    "read_document",
    "record_to_document",
    "write_document",
    "write_record",
]
