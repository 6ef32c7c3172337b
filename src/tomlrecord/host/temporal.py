# topmark:header:start
#
#   project      : TomlRecord
#   file         : temporal.py
#   file_relpath : src/tomlrecord/host/temporal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Temporal adapter between host date/time objects and the codec.

The codec never introspects host temporal objects directly. Everything goes
through [`TemporalFields`][tomlrecord.host.temporal.TemporalFields]:

* stdlib ``date``, ``time`` and ``datetime`` objects are adapted here;
* any other object satisfying the [`TemporalLike`][tomlrecord.host.temporal.TemporalLike]
  protocol is accepted as a datetime. Its offset comes from an ``offset_minutes``
  attribute or, failing that, from a free-text ``zone`` attribute parsed with
  [`parse_zone_offset`][tomlrecord.host.temporal.parse_zone_offset].

Zone text follows a fixed grammar (``±HH:MM``, ``Z``, ``UTC``); anything else is
treated as a naive (local) value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from tomlrecord.config.logging import get_logger

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger

logger: TomlRecordLogger = get_logger(__name__)

_ZONE_OFFSET_RE: Final[re.Pattern[str]] = re.compile(r"([+-])(\d{2}):(\d{2})")


class TemporalKind(Enum):
    """Which parts of a temporal value are meaningful."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"


@dataclass(frozen=True)
class TemporalFields:
    """Plain field view of a host temporal value.

    Fields outside the value's ``kind`` are zero. ``offset_minutes`` is ``None``
    for naive values.
    """

    kind: TemporalKind
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    offset_minutes: int | None = None

    def to_host(self) -> date | time | datetime:
        """Build the matching stdlib object.

        Sub-microsecond digits are truncated; an offset becomes a fixed ``timezone``.
        """
        micro: int = self.nanosecond // 1000
        if self.kind is TemporalKind.DATE:
            return date(self.year, self.month, self.day)
        if self.kind is TemporalKind.TIME:
            return time(self.hour, self.minute, self.second, micro)
        tz: timezone | None = None
        if self.offset_minutes is not None:
            tz = timezone(timedelta(minutes=self.offset_minutes))
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second, micro, tzinfo=tz
        )


@runtime_checkable
class TemporalLike(Protocol):
    """Protocol for host datetime objects with nanosecond precision.

    Implementations may additionally expose ``offset_minutes`` (``int | None``) or a
    free-text ``zone`` attribute.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int


def parse_zone_offset(text: str | None) -> int | None:
    """Parse a zone designator into minutes east of UTC.

    Accepts exactly ``±HH:MM``, ``Z`` and ``UTC`` (case-insensitive, surrounding
    whitespace ignored). Returns ``None`` for anything else, meaning naive/local.

    Args:
        text: Zone text, e.g. ``"+05:30"``.

    Returns:
        The offset in minutes, or ``None``.
    """
    if text is None:
        return None
    value: str = text.strip()
    if value.upper() in ("Z", "UTC"):
        return 0
    match = _ZONE_OFFSET_RE.fullmatch(value)
    if match is None:
        if value:
            logger.debug("Unrecognized zone %r: treating value as naive", text)
        return None
    sign, hh, mm = match.groups()
    hours, minutes = int(hh), int(mm)
    if hours > 23 or minutes > 59:
        logger.debug("Zone %r out of range: treating value as naive", text)
        return None
    total: int = hours * 60 + minutes
    return -total if sign == "-" else total


def _stdlib_offset(value: datetime | time) -> int | None:
    delta: timedelta | None = value.utcoffset()
    if delta is None:
        return None
    return int(delta.total_seconds()) // 60


def temporal_fields(value: object) -> TemporalFields | None:
    """Adapt a host temporal value to `TemporalFields`.

    Returns:
        The field view, or ``None`` if ``value`` is not a recognized temporal value.
    """
    if isinstance(value, datetime):
        return TemporalFields(
            TemporalKind.DATETIME,
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * 1000,
            _stdlib_offset(value),
        )
    if isinstance(value, date):
        return TemporalFields(TemporalKind.DATE, value.year, value.month, value.day)
    if isinstance(value, time):
        return TemporalFields(
            TemporalKind.TIME,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            nanosecond=value.microsecond * 1000,
        )
    if isinstance(value, TemporalLike):
        offset: object = getattr(value, "offset_minutes", None)
        if not isinstance(offset, int) or isinstance(offset, bool):
            offset = parse_zone_offset(getattr(value, "zone", None))
        return TemporalFields(
            TemporalKind.DATETIME,
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.nanosecond,
            offset,
        )
    return None


def is_temporal(value: object) -> bool:
    """Return True if `temporal_fields` recognizes ``value``."""
    return isinstance(value, (date, time)) or isinstance(value, TemporalLike)
