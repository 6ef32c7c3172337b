# topmark:header:start
#
#   project      : TomlRecord
#   file         : sentinels.py
#   file_relpath : src/tomlrecord/codec/sentinels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sentinel records: two-field host records standing in for TOML-only concepts.

Two shapes are recognized, structurally (exact key set and value types):

* formatted integer: ``{"value": int, "format": "hex" | "oct" | "bin"}``
* offset datetime: ``{"datetime": <temporal value>, "offset_minutes": int}``

The reader produces these for base-tagged integers and offset datetimes; the writer
renders them as scalars, never as tables. Any user record with the same shape is
indistinguishable from a real sentinel and is rendered as a scalar too.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Final, cast

from tomlrecord.codec.scalars import node_to_temporal, temporal_to_node
from tomlrecord.document.model import BaseTag, DateTime, Integer
from tomlrecord.host.temporal import TemporalFields, TemporalKind, is_temporal, temporal_fields

if TYPE_CHECKING:
    from tomlrecord.host.types import Record

FORMATTED_INTEGER_KEYS: Final[frozenset[str]] = frozenset({"value", "format"})
OFFSET_DATETIME_KEYS: Final[frozenset[str]] = frozenset({"datetime", "offset_minutes"})

FORMAT_BY_BASE: Final[dict[BaseTag, str]] = {
    BaseTag.HEX: "hex",
    BaseTag.OCTAL: "oct",
    BaseTag.BINARY: "bin",
}
BASE_BY_FORMAT: Final[dict[str, BaseTag]] = {v: k for k, v in FORMAT_BY_BASE.items()}


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_formatted_integer(record: object) -> bool:
    """Return True if ``record`` has the formatted-integer sentinel shape."""
    if not isinstance(record, Mapping) or set(record.keys()) != FORMATTED_INTEGER_KEYS:
        return False
    fmt: object = record["format"]
    return _is_plain_int(record["value"]) and isinstance(fmt, str) and fmt in BASE_BY_FORMAT


def is_offset_datetime(record: object) -> bool:
    """Return True if ``record`` has the offset-datetime sentinel shape."""
    if not isinstance(record, Mapping) or set(record.keys()) != OFFSET_DATETIME_KEYS:
        return False
    return is_temporal(record["datetime"]) and _is_plain_int(record["offset_minutes"])


def is_sentinel(value: object) -> bool:
    """Return True if ``value`` is either sentinel shape."""
    return is_formatted_integer(value) or is_offset_datetime(value)


def make_formatted_integer(value: int, base: BaseTag) -> Record:
    """Build a formatted-integer sentinel.

    Raises:
        ValueError: If ``base`` is decimal (decimal integers are plain ``int``).
    """
    if base is BaseTag.DECIMAL:
        raise ValueError("Decimal integers are not represented as sentinels")
    return {"value": value, "format": FORMAT_BY_BASE[base]}


def make_offset_datetime(datetime: Any, offset_minutes: int) -> Record:
    """Build an offset-datetime sentinel around a naive datetime."""
    return {"datetime": datetime, "offset_minutes": offset_minutes}


def sentinel_to_node(record: Mapping[str, Any]) -> Integer | DateTime:
    """Convert a sentinel record to the scalar node it stands for.

    A date-only ``datetime`` field is taken at midnight.

    Raises:
        ValueError: If ``record`` is not a sentinel, or its fields are out of range.
    """
    if is_formatted_integer(record):
        return Integer(record["value"], BASE_BY_FORMAT[record["format"]])
    if is_offset_datetime(record):
        fields: TemporalFields | None = temporal_fields(record["datetime"])
        if fields is None or fields.kind is TemporalKind.TIME:
            raise ValueError("Offset datetime sentinel needs a date or datetime value")
        as_datetime: TemporalFields = replace(
            fields, kind=TemporalKind.DATETIME, offset_minutes=record["offset_minutes"]
        )
        return cast("DateTime", temporal_to_node(as_datetime))
    raise ValueError("Record is not a sentinel")


def node_to_sentinel(node: Integer | DateTime) -> Record:
    """Convert a base-tagged integer or offset datetime node to its sentinel record.

    The datetime inside an offset-datetime sentinel is naive; the offset lives in
    ``offset_minutes``.

    Raises:
        ValueError: If the node carries no base tag or no offset.
    """
    if isinstance(node, Integer):
        return make_formatted_integer(node.value, node.base)
    if node.offset is None:
        raise ValueError("Naive datetimes are not represented as sentinels")
    naive: DateTime = DateTime(node.date, node.time, None)
    return make_offset_datetime(node_to_temporal(naive).to_host(), node.offset.minutes)
