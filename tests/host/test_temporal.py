# topmark:header:start
#
#   project      : TomlRecord
#   file         : test_temporal.py
#   file_relpath : tests/host/test_temporal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the host temporal adapter (`tomlrecord.host.temporal`)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from tests.conftest import parametrize
from tomlrecord.host.temporal import (
    TemporalFields,
    TemporalKind,
    is_temporal,
    parse_zone_offset,
    temporal_fields,
)


@dataclass
class NanoStamp:
    """A host datetime with nanosecond precision and a free-text zone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    zone: str | None = None


@parametrize(
    "text, expected",
    [
        ("+05:30", 330),
        ("-08:00", -480),
        ("Z", 0),
        ("utc", 0),
        (" +01:00 ", 60),
        ("Europe/Brussels", None),
        ("+5:30", None),
        ("+24:00", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_zone_offset(text: str | None, expected: int | None) -> None:
    """Only the fixed grammar is accepted; anything else is naive."""
    assert parse_zone_offset(text) == expected


def test_temporal_fields_stdlib() -> None:
    """Stdlib objects are adapted with microseconds scaled to nanoseconds."""
    aware = datetime(2024, 1, 2, 3, 4, 5, 6, tzinfo=timezone(timedelta(minutes=-90)))
    assert temporal_fields(aware) == TemporalFields(
        TemporalKind.DATETIME, 2024, 1, 2, 3, 4, 5, 6000, -90
    )
    assert temporal_fields(date(2024, 1, 2)) == TemporalFields(TemporalKind.DATE, 2024, 1, 2)
    assert temporal_fields(time(3, 4, 5)) == TemporalFields(
        TemporalKind.TIME, hour=3, minute=4, second=5
    )
    assert temporal_fields("2024-01-02") is None


def test_temporal_fields_protocol_objects() -> None:
    """Objects exposing the datetime fields are accepted; zone text gives the offset."""
    stamp = NanoStamp(2024, 1, 2, 3, 4, 5, 123_456_789, zone="+02:00")
    assert is_temporal(stamp)
    fields = temporal_fields(stamp)
    assert fields is not None
    assert fields.kind is TemporalKind.DATETIME
    assert fields.nanosecond == 123_456_789
    assert fields.offset_minutes == 120

    naive = temporal_fields(NanoStamp(2024, 1, 2, 3, 4, 5, 0, zone="local"))
    assert naive is not None and naive.offset_minutes is None


def test_to_host_truncates_to_microseconds() -> None:
    """Sub-microsecond digits are dropped when building stdlib objects."""
    fields = TemporalFields(TemporalKind.DATETIME, 2024, 1, 2, 3, 4, 5, 123_456_789, 60)
    value = fields.to_host()
    assert value == datetime(2024, 1, 2, 3, 4, 5, 123_456, tzinfo=timezone(timedelta(hours=1)))
    assert TemporalFields(TemporalKind.TIME, hour=1, nanosecond=999).to_host() == time(1)
