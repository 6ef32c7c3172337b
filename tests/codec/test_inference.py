# topmark:header:start
#
#   project      : TomlRecord
#   file         : test_inference.py
#   file_relpath : tests/codec/test_inference.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for array classification and host-to-node conversion."""

from __future__ import annotations

from datetime import datetime

import pytest

from tests.conftest import make_options, parametrize
from tomlrecord.codec.inference import (
    ArrayKind,
    HostConverter,
    classify_array,
    host_to_node,
    record_to_document,
    vector_from_nodes,
)
from tomlrecord.core.diagnostics import DiagnosticLog
from tomlrecord.core.errors import NestingDepthError, UnsupportedValueError
from tomlrecord.document.model import (
    Array,
    BaseTag,
    Boolean,
    Float,
    Integer,
    String,
    Table,
    TableEntry,
)
from tomlrecord.host.types import BooleanVector, FloatVector, IntegerVector


@parametrize(
    "items, expected",
    [
        ((Integer(1), Integer(2)), ArrayKind.INTEGER_VECTOR),
        ((Integer(1), Float(2.5)), ArrayKind.FLOAT_VECTOR),
        ((Float(1.0),), ArrayKind.FLOAT_VECTOR),
        ((Boolean(True), Boolean(False)), ArrayKind.BOOLEAN_VECTOR),
        ((Integer(1), String("a")), ArrayKind.LIST),
        ((Boolean(True), Integer(1)), ArrayKind.LIST),
        ((), ArrayKind.LIST),
        ((Table(),), ArrayKind.LIST),
    ],
)
def test_classify_array(items: tuple[object, ...], expected: ArrayKind) -> None:
    """Fixed precedence: integers, then numbers, then booleans, else a list."""
    assert classify_array(items) is expected  # type: ignore[arg-type]


def test_vector_from_nodes_widens_integers() -> None:
    """Mixed integer/float arrays become float vectors; base tags are dropped."""
    vec = vector_from_nodes((Integer(1), Float(2.5)), ArrayKind.FLOAT_VECTOR)
    assert isinstance(vec, FloatVector)
    assert vec == [1.0, 2.5]
    assert all(isinstance(v, float) for v in vec)

    ints = vector_from_nodes((Integer(255, BaseTag.HEX),), ArrayKind.INTEGER_VECTOR)
    assert isinstance(ints, IntegerVector)
    assert ints == [255]

    with pytest.raises(ValueError):
        vector_from_nodes((), ArrayKind.LIST)


def test_record_to_document_keeps_field_order() -> None:
    """Entries follow the record's insertion order."""
    table = record_to_document({"z": 1, "a": "x", "m": True})
    assert table.keys() == ["z", "a", "m"]
    assert table.get("a") == String("x")


def test_host_to_node_containers() -> None:
    """Mappings become tables, sequences become arrays (vectors included)."""
    node = host_to_node({"v": IntegerVector([1, 2]), "t": (True, "x"), "b": BooleanVector([True])})
    assert node == Table(
        (
            TableEntry("v", Array((Integer(1), Integer(2)))),
            TableEntry("t", Array((Boolean(True), String("x")))),
            TableEntry("b", Array((Boolean(True),))),
        )
    )


def test_host_to_node_resolves_sentinels_as_scalars() -> None:
    """A sentinel-shaped record is a scalar, not a table."""
    assert host_to_node({"value": 255, "format": "hex"}) == Integer(255, BaseTag.HEX)


def test_unsupported_values_are_skipped_with_warning() -> None:
    """Lenient mode skips unsupported fields and array elements, one warning each."""
    diagnostics = DiagnosticLog()
    table = record_to_document(
        {"a": None, "b": 1, "c": [1, None, 2], 3: "int key", "d": 2**70},
        diagnostics=diagnostics,
    )
    assert table.keys() == ["b", "c"]
    assert table.get("c") == Array((Integer(1), Integer(2)))
    assert len(diagnostics) == 4
    assert diagnostics.stats().n_warning == 4


def test_unsupported_value_raises_in_strict_mode() -> None:
    """Strict mode raises on the first unsupported value, naming its path."""
    with pytest.raises(UnsupportedValueError) as excinfo:
        record_to_document({"outer": {"inner": None}}, make_options(strict=True))
    assert excinfo.value.path == "outer.inner"


def test_invalid_sentinel_is_reported_as_unsupported() -> None:
    """A sentinel whose fields cannot be represented is skipped."""
    diagnostics = DiagnosticLog()
    table = record_to_document(
        {"when": {"datetime": "2024-01-01", "offset_minutes": 0}, "ok": 1},
        diagnostics=diagnostics,
    )
    # not a sentinel (datetime is a string): converted as a plain table
    assert table.get("when") == Table(
        (TableEntry("datetime", String("2024-01-01")), TableEntry("offset_minutes", Integer(0)))
    )

    table = record_to_document(
        {"when": {"datetime": datetime(2024, 1, 1), "offset_minutes": 5000}},
        diagnostics=diagnostics,
    )
    assert table.keys() == []
    assert diagnostics.has_warning()


def test_depth_guard() -> None:
    """Nesting deeper than max_depth raises NestingDepthError."""
    deep: dict[str, object] = {"leaf": 1}
    for _ in range(5):
        deep = {"n": deep}
    converter = HostConverter(make_options(max_depth=3))
    with pytest.raises(NestingDepthError):
        converter.to_table(deep)

    assert HostConverter(make_options(max_depth=10)).to_table(deep).keys() == ["n"]
