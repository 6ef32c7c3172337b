# topmark:header:start
#
#   project      : TomlRecord
#   file         : render.py
#   file_relpath : src/tomlrecord/cli/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render host records for the terminal: JSON and an indented text outline."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import replace
from datetime import date, time
from typing import TYPE_CHECKING, Any

from tomlrecord.codec.inference import HostConverter
from tomlrecord.codec.scalars import format_float
from tomlrecord.codec.sentinels import is_formatted_integer, is_offset_datetime, is_sentinel
from tomlrecord.codec.writer import DocumentWriter
from tomlrecord.config.options import CodecOptions

if TYPE_CHECKING:
    from tomlrecord.document.model import DocNode
    from tomlrecord.host.types import Record


def to_jsonable(value: Any) -> Any:
    """Return ``value`` with temporal objects replaced by ISO 8601 strings.

    Non-finite floats become their TOML literals (``"nan"``, ``"inf"``, ``"-inf"``)
    so the output stays strict JSON. Typed vectors become plain lists; sentinel
    records stay two-key objects.
    """
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (date, time)):
        # datetime is a date subclass
        return value.isoformat()
    if isinstance(value, float) and not math.isfinite(value):
        return format_float(value)
    return value


def _kind_of(value: Any) -> str:
    if is_formatted_integer(value):
        return "formatted integer"
    if is_offset_datetime(value):
        return "offset datetime"
    return type(value).__name__


def render_json(record: Record, indent: int = 2) -> str:
    """Render a record as JSON text (ends with a newline)."""
    return (
        json.dumps(to_jsonable(record), indent=indent, ensure_ascii=False, allow_nan=False) + "\n"
    )


def render_outline(record: Record, options: CodecOptions | None = None) -> str:
    """Render a record as an indented outline.

    Each leaf shows its TOML literal and the host type it was read as::

        server:
          ports = [80, 443]  (IntegerVector)
          mask = 0xFF  (formatted integer)
    """
    # Floats keep their fractional digit in the outline
    opts: CodecOptions = replace(options or CodecOptions(), narrow_integral_floats=False)
    converter = HostConverter(opts)
    writer = DocumentWriter(opts)
    lines: list[str] = []

    def walk(rec: Mapping[str, Any], indent: str) -> None:
        for key, value in rec.items():
            if isinstance(value, Mapping) and not is_sentinel(value):
                lines.append(f"{indent}{key}:")
                walk(value, indent + "  ")
                continue
            node: DocNode | None = converter.to_node(value, key)
            literal: str = "<unsupported>"
            if node is not None:
                literal = writer.render_value(node, [key], 0, inline=True)
            lines.append(f"{indent}{key} = {literal}  ({_kind_of(value)})")

    walk(record, "")
    return "".join(f"{line}\n" for line in lines)
