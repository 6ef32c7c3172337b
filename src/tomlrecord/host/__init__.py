# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/host/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host-side value types: records, typed vectors and the temporal adapter."""

from __future__ import annotations

from tomlrecord.host.temporal import (
    TemporalFields,
    TemporalKind,
    TemporalLike,
    parse_zone_offset,
    temporal_fields,
)
from tomlrecord.host.types import (
    BooleanVector,
    FloatVector,
    HostValue,
    IntegerVector,
    Record,
)

__all__ = [
    "BooleanVector",
    "FloatVector",
    "HostValue",
    "IntegerVector",
    "Record",
    "TemporalFields",
    "TemporalKind",
    "TemporalLike",
    "parse_zone_offset",
    "temporal_fields",
]
