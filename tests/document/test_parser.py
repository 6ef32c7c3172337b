# topmark:header:start
#
#   project      : TomlRecord
#   file         : test_parser.py
#   file_relpath : tests/document/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `tomlkit`-backed document parser (`tomlrecord.document.parser`).

These act as guardrails around the position tracking that walks ``tomlkit``'s
container body; if ``tomlkit`` changes its representation, the line numbers and the
merged out-of-order tables checked here should catch it.
"""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from tomlrecord.core.errors import ErrorCategory, MalformedInputError
from tomlrecord.document.model import (
    Array,
    BaseTag,
    Date,
    DateTime,
    Integer,
    Offset,
    Position,
    String,
    Table,
    Time,
)
from tomlrecord.document.parser import base_of_literal, nanoseconds_of_literal, parse_document


def _lines(table: Table) -> dict[str, int]:
    out: dict[str, int] = {}
    for entry in table:
        assert entry.node.position is not None, entry.key
        out[entry.key] = entry.node.position.line
    return out


def test_key_value_positions() -> None:
    """Each top-level value gets the line of its key; comments and blanks count."""
    text = "# header comment\na = 1\n\n  b = 'x'  # trailing\nc = true\n"
    root = parse_document(text)
    assert root.keys() == ["a", "b", "c"]
    assert _lines(root) == {"a": 2, "b": 4, "c": 5}
    b = root.get("b")
    assert b is not None and b.position == Position(4, 3)


def test_multiline_values_advance_lines() -> None:
    """Values spanning several lines push later positions down."""
    text = 's = """\none\ntwo"""\narr = [\n  1,\n  2,\n]\nlast = 0\n'
    root = parse_document(text)
    assert _lines(root) == {"s": 1, "arr": 4, "last": 8}
    s = root.get("s")
    assert isinstance(s, String) and s.multiline and s.value == "one\ntwo"


def test_table_positions_are_header_lines() -> None:
    """Tables take the line of their header; their entries keep their own lines."""
    text = "top = 1\n\n[server]\nhost = 'h'\nport = 80\n\n[client]\nid = 3\n"
    root = parse_document(text)
    assert _lines(root) == {"top": 1, "server": 3, "client": 7}
    server = root.get("server")
    assert isinstance(server, Table)
    assert _lines(server) == {"host": 4, "port": 5}


def test_super_table_takes_first_child_position() -> None:
    """``[a.b]`` creates an implicit ``a`` positioned at its first child."""
    text = "x = 0\n[a.b]\ny = 1\n[a.c]\nz = 2\n"
    root = parse_document(text)
    a = root.get("a")
    assert isinstance(a, Table)
    assert a.position == Position(2, 1)
    assert _lines(a) == {"b": 2, "c": 4}


def test_dotted_keys() -> None:
    """Dotted keys build nested tables positioned at their first line."""
    text = "name = 'n'\nsite.url = 'u'\nsite.port = 1\nafter = 2\n"
    root = parse_document(text)
    assert root.keys() == ["name", "site", "after"]
    site = root.get("site")
    assert isinstance(site, Table)
    assert site.keys() == ["url", "port"]
    assert _lines(root) == {"name": 1, "site": 2, "after": 4}
    assert _lines(site) == {"url": 2, "port": 3}


def test_out_of_order_tables_are_merged() -> None:
    """A table re-opened later through a sub-table keeps its first position."""
    text = "[a]\nx = 1\n[b]\ny = 1\n[a.c]\nz = 1\n"
    root = parse_document(text)
    assert root.keys() == ["a", "b"]
    a = root.get("a")
    assert isinstance(a, Table)
    assert a.position == Position(1, 1)
    assert a.keys() == ["x", "c"]
    assert _lines(a) == {"x": 2, "c": 5}


def test_array_of_tables() -> None:
    """Each element of an array of tables is a positioned table."""
    text = "[[p]]\nn = 1\n\n[[p]]\nn = 2\n"
    root = parse_document(text)
    p = root.get("p")
    assert isinstance(p, Array)
    assert p.position == Position(1, 1)
    assert [t.position.line for t in p if t.position is not None] == [1, 4]
    assert all(isinstance(t, Table) for t in p)


def test_inline_containers_have_no_inner_positions() -> None:
    """Inline table entries and array elements carry no position."""
    root = parse_document("t = { b = 1, a = 2 }\nl = [1, 'x']\n")
    t = root.get("t")
    assert isinstance(t, Table)
    assert t.keys() == ["b", "a"]
    assert all(e.node.position is None for e in t)
    lst = root.get("l")
    assert isinstance(lst, Array)
    assert all(n.position is None for n in lst)


def test_integer_bases() -> None:
    """Prefixed integer literals keep their base tag."""
    root = parse_document("h = 0xff\no = 0o17\nb = 0b101\nd = 1_000\n")
    assert root.get("h") == Integer(255, BaseTag.HEX)
    assert root.get("o") == Integer(15, BaseTag.OCTAL)
    assert root.get("b") == Integer(5, BaseTag.BINARY)
    assert root.get("d") == Integer(1000, BaseTag.DECIMAL)


def test_temporals_keep_nanoseconds_and_offsets() -> None:
    """Fractions are kept to nanoseconds; offsets are in minutes."""
    text = (
        "odt = 1979-05-27T07:32:00.999999999-07:00\n"
        "ldt = 1979-05-27 07:32:00.5\n"
        "utc = 1979-05-27T07:32:00Z\n"
        "ld = 1979-05-27\n"
        "lt = 00:32:00.123\n"
    )
    root = parse_document(text)
    assert root.get("odt") == DateTime(
        Date(1979, 5, 27), Time(7, 32, 0, 999_999_999), Offset(-420)
    )
    assert root.get("ldt") == DateTime(Date(1979, 5, 27), Time(7, 32, 0, 500_000_000), None)
    assert root.get("utc") == DateTime(Date(1979, 5, 27), Time(7, 32, 0), Offset(0))
    assert root.get("ld") == Date(1979, 5, 27)
    assert root.get("lt") == Time(0, 32, 0, 123_000_000)


@parametrize(
    "raw, expected",
    [
        ("0xFF", BaseTag.HEX),
        ("0o7", BaseTag.OCTAL),
        ("0b1", BaseTag.BINARY),
        ("-12", BaseTag.DECIMAL),
    ],
)
def test_base_of_literal(raw: str, expected: BaseTag) -> None:
    """The base is read from the literal's prefix."""
    assert base_of_literal(raw) is expected


def test_nanoseconds_of_literal() -> None:
    """Digits beyond nine are dropped; short fractions are right-padded."""
    assert nanoseconds_of_literal("07:32:00") == 0
    assert nanoseconds_of_literal("07:32:00.1") == 100_000_000
    assert nanoseconds_of_literal("07:32:00.1234567891") == 123_456_789


@parametrize(
    "text",
    ["a = \n", "a = 1\na = 2\n", "[t]\n[t]\n", "x = [1, 2\n", "= 3\n"],
)
def test_malformed_input(text: str) -> None:
    """Invalid TOML raises MalformedInputError in the malformed-input category."""
    with pytest.raises(MalformedInputError) as excinfo:
        parse_document(text)
    assert excinfo.value.category is ErrorCategory.MALFORMED_INPUT
    assert str(excinfo.value).startswith("malformed input: ")


def test_malformed_input_reports_line() -> None:
    """Parse errors carry the line reported by the parser."""
    with pytest.raises(MalformedInputError) as excinfo:
        parse_document("ok = 1\nbroken = \n")
    assert excinfo.value.line == 2
