# topmark:header:start
#
#   project      : TomlRecord
#   file         : test_writer.py
#   file_relpath : tests/codec/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ordered writer (`tomlrecord.codec.writer`).

The writer must emit every ``key = value`` line of a table before any nested
section header, keep declaration order inside each group, and produce text that
`tomlkit` accepts.
"""

from __future__ import annotations

import pytest
import tomlkit

from tests.conftest import make_options
from tomlrecord.codec.inference import record_to_document
from tomlrecord.codec.writer import (
    DocumentWriter,
    is_table_array,
    partition_table,
    write_document,
    write_record,
)
from tomlrecord.core.errors import NestingDepthError
from tomlrecord.document.model import Array, Integer, Table


def test_partition_table_groups_in_declaration_order() -> None:
    """Assignments, tables and arrays of tables are split, each group keeping its order."""
    table = record_to_document(
        {
            "t1": {"x": 1},
            "a": 1,
            "aot": [{"y": 1}],
            "b": [1, 2],
            "t2": {},
            "c": "s",
        }
    )
    sections = partition_table(table)
    assert [e.key for e in sections.assignments] == ["a", "b", "c"]
    assert [e.key for e in sections.tables] == ["t1", "t2"]
    assert [e.key for e in sections.table_arrays] == ["aot"]


def test_is_table_array() -> None:
    """Only non-empty arrays made entirely of tables are arrays of tables."""
    assert is_table_array(Array((Table(), Table())))
    assert not is_table_array(Array(()))
    assert not is_table_array(Array((Table(), Integer(1))))
    assert not is_table_array(Integer(1))


def test_write_record_layout() -> None:
    """Scalars first, then sections, then arrays of tables, blank line before headers."""
    record = {
        "owner": {"name": "Tom"},
        "title": "Example",
        "servers": [{"ip": "10.0.0.1"}, {"ip": "10.0.0.2"}],
        "ports": [8000, 8001],
    }
    expected = (
        'title = "Example"\n'
        "ports = [8000, 8001]\n"
        "\n"
        "[owner]\n"
        'name = "Tom"\n'
        "\n"
        "[[servers]]\n"
        'ip = "10.0.0.1"\n'
        "\n"
        "[[servers]]\n"
        'ip = "10.0.0.2"\n'
    )
    text = write_record(record)
    assert text == expected
    assert tomlkit.parse(text).unwrap() == {
        "title": "Example",
        "ports": [8000, 8001],
        "owner": {"name": "Tom"},
        "servers": [{"ip": "10.0.0.1"}, {"ip": "10.0.0.2"}],
    }


def test_scalars_after_nested_table_stay_in_parent() -> None:
    """A scalar declared after a nested table is emitted before the nested header."""
    text = write_record({"a": {"t": {"x": 1}, "y": 2}})
    assert text == "[a]\ny = 2\n\n[a.t]\nx = 1\n"
    assert tomlkit.parse(text).unwrap() == {"a": {"y": 2, "t": {"x": 1}}}


def test_section_spacing_disabled() -> None:
    """Without section spacing, headers follow the previous line directly."""
    text = write_record({"a": 1, "t": {"b": 2}}, make_options(section_spacing=False))
    assert text == "a = 1\n[t]\nb = 2\n"


def test_inline_containers() -> None:
    """Arrays mixing tables and scalars render inline, tables inside as inline tables."""
    text = write_record({"mixed": [{"a": 1}, 2], "empty": [], "nested": [[1, 2], ["x"]]})
    assert text == 'mixed = [{ a = 1 }, 2]\nempty = []\nnested = [[1, 2], ["x"]]\n'
    assert tomlkit.parse(text).unwrap() == {
        "mixed": [{"a": 1}, 2],
        "empty": [],
        "nested": [[1, 2], ["x"]],
    }


def test_empty_inline_table() -> None:
    """An empty table inside an inline array renders as ``{}``."""
    assert write_record({"v": [{}, 1]}) == "v = [{}, 1]\n"


def test_strings_multiline_only_outside_inline_containers() -> None:
    """Top-level multi-line text uses the multi-line form; inside arrays it is escaped."""
    text = write_record({"s": "a\nb", "l": ["a\nb", "c"]})
    assert text == 's = """\na\nb"""\nl = ["a\\nb", "c"]\n'
    assert tomlkit.parse(text).unwrap() == {"s": "a\nb", "l": ["a\nb", "c"]}


def test_multiline_strings_disabled() -> None:
    """The multi-line form can be switched off."""
    text = write_record({"s": "a\nb"}, make_options(multiline_strings=False))
    assert text == 's = "a\\nb"\n'


def test_quoted_keys_in_headers() -> None:
    """Keys that are not bare are quoted in assignments and in header paths."""
    text = write_record({"a b": {"c.d": 1}})
    assert text == '["a b"]\n"c.d" = 1\n'
    assert tomlkit.parse(text).unwrap() == {"a b": {"c.d": 1}}


def test_sentinels_render_as_scalars() -> None:
    """Formatted integers keep their base when written."""
    text = write_record(
        {"mask": {"value": 255, "format": "hex"}, "mode": {"value": 8, "format": "oct"}}
    )
    assert text == "mask = 0xFF\nmode = 0o10\n"


def test_sentinel_shaped_records_with_other_field_types_are_tables() -> None:
    """A value/format record whose format is not a base name is a plain table."""
    assert write_record({"k": {"value": 1, "format": ["x"]}}) == '[k]\nvalue = 1\nformat = ["x"]\n'
    assert write_record({"k": {"value": 1, "format": {"base": 16}}}) == (
        "[k]\nvalue = 1\n\n[k.format]\nbase = 16\n"
    )


def test_empty_record_renders_empty_text() -> None:
    """An empty record has an empty document."""
    assert write_record({}) == ""
    assert write_document(Table()) == ""


def test_depth_guard() -> None:
    """Trees deeper than max_depth raise NestingDepthError while writing."""
    node: Table = Table.from_pairs([("leaf", Integer(1))])
    for _ in range(5):
        node = Table.from_pairs([("n", node)])
    with pytest.raises(NestingDepthError):
        DocumentWriter(make_options(max_depth=3)).write(node)
    text = DocumentWriter(make_options(max_depth=10)).write(node)
    assert text.startswith("[n]\n")
    assert text.endswith("[n.n.n.n.n]\nleaf = 1\n")
