# topmark:header:start
#
#   project      : TomlRecord
#   file         : scalars.py
#   file_relpath : src/tomlrecord/codec/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar formatting: document leaf nodes to TOML text, host scalars to nodes.

Float rendering constants:
    * values with ``|v| >= SCI_UPPER_THRESHOLD`` or ``0 < |v| < SCI_LOWER_THRESHOLD``
      use scientific notation with ``SCI_MANTISSA_DIGITS`` significant digits, trailing
      mantissa zeros stripped (``1e+12``, ``5e-05``);
    * integral values keep exactly one fractional digit (``3.0``);
    * everything else uses ``FIXED_SIGNIFICANT_DIGITS`` significant digits, trailing
      zeros stripped.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final

from tomlrecord.config.logging import get_logger
from tomlrecord.document.model import (
    INT64_MAX,
    INT64_MIN,
    BaseTag,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    Offset,
    String,
    Time,
)
from tomlrecord.host.temporal import TemporalFields, TemporalKind, temporal_fields

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.document.model import DocNode

logger: TomlRecordLogger = get_logger(__name__)

SCI_UPPER_THRESHOLD: Final[float] = 1e10
SCI_LOWER_THRESHOLD: Final[float] = 1e-4
SCI_MANTISSA_DIGITS: Final[int] = 11
FIXED_SIGNIFICANT_DIGITS: Final[int] = 12

_BARE_KEY_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_-]+")

_PREFIX_BY_BASE: Final[dict[BaseTag, tuple[str, str]]] = {
    BaseTag.HEX: ("0x", "X"),
    BaseTag.OCTAL: ("0o", "o"),
    BaseTag.BINARY: ("0b", "b"),
}

_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


# --- Integers and floats ---


def format_integer(value: int, base: BaseTag = BaseTag.DECIMAL) -> str:
    """Render an integer in the given base.

    Negative values in a non-decimal base render as ``-`` + prefix + magnitude digits.

    Args:
        value: The integer.
        base: The base tag.

    Returns:
        The integer literal, e.g. ``0xFF``, ``0o17``, ``0b101`` or ``42``.
    """
    if base is BaseTag.DECIMAL:
        return str(value)
    prefix, digits_fmt = _PREFIX_BY_BASE[base]
    sign: str = "-" if value < 0 else ""
    return f"{sign}{prefix}{format(abs(value), digits_fmt)}"


def format_float(value: float) -> str:
    """Render a float as a TOML float literal.

    Args:
        value: The float.

    Returns:
        The literal: ``nan``, ``inf``, ``-inf``, scientific or fixed notation.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    magnitude: float = abs(value)
    if magnitude >= SCI_UPPER_THRESHOLD or 0.0 < magnitude < SCI_LOWER_THRESHOLD:
        mantissa, exponent = f"{value:.{SCI_MANTISSA_DIGITS - 1}e}".split("e")
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        text: str = f"{mantissa}e{exponent}"
        if math.isinf(float(text)):
            # rounding pushed the value past the largest finite double
            return repr(value)
        return text

    if value.is_integer():
        return f"{value:.1f}"

    text = f"{value:.{FIXED_SIGNIFICANT_DIGITS}g}"
    if "." not in text:
        # rounding to 12 digits made the value integral
        text += ".0"
    return text


# --- Strings and keys ---


def _escape(text: str) -> str:
    parts: list[str] = []
    for ch in text:
        escaped: str | None = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{ord(ch):04X}")
        else:
            parts.append(ch)
    return "".join(parts)


def _is_verbatim_safe(text: str) -> bool:
    """Return True if ``text`` can sit unescaped inside a multi-line basic string."""
    if "\\" in text or '"""' in text or text.endswith('"'):
        return False
    return not any((ord(ch) < 0x20 and ch not in "\n\t") or ord(ch) == 0x7F for ch in text)


def format_string(text: str, multiline_preferred: bool = True) -> str:
    """Render text as a TOML basic string.

    Text containing a newline renders as a multi-line string (``\"\"\"`` + newline +
    verbatim text + ``\"\"\"``) when ``multiline_preferred`` is set and the text needs
    no escaping. Otherwise the text is escaped into a single-line string.

    Args:
        text: The text to render.
        multiline_preferred: Allow the multi-line form.

    Returns:
        The quoted string literal.
    """
    if multiline_preferred and "\n" in text and _is_verbatim_safe(text):
        return f'"""\n{text}"""'
    return f'"{_escape(text)}"'


def format_key(key: str) -> str:
    """Render a single key: bare when possible, quoted otherwise."""
    if _BARE_KEY_RE.fullmatch(key):
        return key
    return f'"{_escape(key)}"'


def format_key_path(keys: Iterable[str]) -> str:
    """Render a dotted key path such as ``servers."alpha beta".ip``."""
    return ".".join(format_key(k) for k in keys)


# --- Temporal values ---


def format_date(node: Date) -> str:
    """Render ``YYYY-MM-DD``."""
    return f"{node.year:04d}-{node.month:02d}-{node.day:02d}"


def format_time(node: Time) -> str:
    """Render ``HH:MM:SS`` with the nanosecond fraction, trailing zeros trimmed."""
    text: str = f"{node.hour:02d}:{node.minute:02d}:{node.second:02d}"
    if node.nanosecond:
        text += "." + f"{node.nanosecond:09d}".rstrip("0")
    return text


def format_offset(offset: Offset) -> str:
    """Render ``Z`` for UTC, ``±HH:MM`` otherwise."""
    if offset.minutes == 0:
        return "Z"
    sign: str = "-" if offset.minutes < 0 else "+"
    hours, minutes = divmod(abs(offset.minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_datetime(node: DateTime) -> str:
    """Render ``<date>T<time>`` plus the offset, if any."""
    text: str = f"{format_date(node.date)}T{format_time(node.time)}"
    if node.offset is not None:
        text += format_offset(node.offset)
    return text


# --- Dispatch ---


def format_scalar(node: DocNode, *, multiline_strings: bool = True) -> str:
    """Render any scalar document node.

    Negative integers tagged hex/octal/binary render in decimal: TOML has no signed
    prefixed integer literals.

    Raises:
        TypeError: If ``node`` is a table or an array.
    """
    if isinstance(node, Boolean):
        return "true" if node.value else "false"
    if isinstance(node, Integer):
        if node.value < 0 and node.base is not BaseTag.DECIMAL:
            logger.debug("Negative %s integer %d rendered in decimal", node.base.value, node.value)
            return format_integer(node.value)
        return format_integer(node.value, node.base)
    if isinstance(node, Float):
        return format_float(node.value)
    if isinstance(node, String):
        return format_string(node.value, multiline_strings)
    if isinstance(node, DateTime):
        return format_datetime(node)
    if isinstance(node, Date):
        return format_date(node)
    if isinstance(node, Time):
        return format_time(node)
    raise TypeError(f"Not a scalar node: {type(node).__name__}")


# --- Host scalar -> node ---


def temporal_to_node(fields: TemporalFields) -> Date | Time | DateTime:
    """Build the document node for an adapted temporal value.

    Raises:
        ValueError: If a field is out of range.
    """
    if fields.kind is TemporalKind.DATE:
        return Date(fields.year, fields.month, fields.day)
    tod = Time(fields.hour, fields.minute, fields.second, fields.nanosecond)
    if fields.kind is TemporalKind.TIME:
        return tod
    offset: Offset | None = None if fields.offset_minutes is None else Offset(fields.offset_minutes)
    return DateTime(Date(fields.year, fields.month, fields.day), tod, offset)


def node_to_temporal(node: Date | Time | DateTime) -> TemporalFields:
    """Return the field view of a temporal node (the inverse of `temporal_to_node`)."""
    if isinstance(node, Date):
        return TemporalFields(TemporalKind.DATE, node.year, node.month, node.day)
    if isinstance(node, Time):
        return TemporalFields(
            TemporalKind.TIME,
            hour=node.hour,
            minute=node.minute,
            second=node.second,
            nanosecond=node.nanosecond,
        )
    return TemporalFields(
        TemporalKind.DATETIME,
        node.date.year,
        node.date.month,
        node.date.day,
        node.time.hour,
        node.time.minute,
        node.time.second,
        node.time.nanosecond,
        None if node.offset is None else node.offset.minutes,
    )


def scalar_to_node(value: object, *, narrow_integral_floats: bool = True) -> DocNode | None:
    """Convert a host scalar to a document node.

    Args:
        value: A ``bool``, ``int``, ``float``, ``str`` or temporal value.
        narrow_integral_floats: Emit integral floats within the signed 64-bit range
            as integers.

    Returns:
        The node, or ``None`` when ``value`` has no scalar mapping (including
        integers outside the signed 64-bit range).

    Raises:
        ValueError: If a temporal value has out-of-range fields.
    """
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            return None
        return Integer(value)
    if isinstance(value, float):
        if narrow_integral_floats and value.is_integer() and INT64_MIN <= value <= INT64_MAX:
            return Integer(int(value))
        return Float(value)
    if isinstance(value, str):
        return String(value, multiline="\n" in value)
    fields: TemporalFields | None = temporal_fields(value)
    if fields is not None:
        return temporal_to_node(fields)
    return None
