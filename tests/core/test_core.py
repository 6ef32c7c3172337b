# topmark:header:start
#
#   project      : TomlRecord
#   file         : test_core.py
#   file_relpath : tests/core/test_core.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostics, codec errors and atomic file output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import parametrize
from tomlrecord.core.diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    compute_diagnostic_stats,
)
from tomlrecord.core.errors import (
    ErrorCategory,
    InputError,
    MalformedInputError,
    NestingDepthError,
    OutputError,
    UnsupportedValueError,
)
from tomlrecord.core.files import atomic_write_text

if TYPE_CHECKING:
    from pathlib import Path


def test_diagnostic_log_counts_by_level() -> None:
    """Stats and the dict view count each severity separately."""
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w1")
    log.add_warning("w2")

    assert len(log) == 3
    assert log.has_warning()
    assert not log.has_error()
    assert log.stats().total == 3
    assert log.to_dict() == {"info": 1, "warning": 2, "error": 0}
    assert [d.message for d in log] == ["i", "w1", "w2"]


def test_compute_stats_on_plain_iterable() -> None:
    stats = compute_diagnostic_stats(
        [Diagnostic(DiagnosticLevel.ERROR, "e"), Diagnostic(DiagnosticLevel.ERROR, "f")]
    )
    assert (stats.n_info, stats.n_warning, stats.n_error) == (0, 0, 2)


@parametrize(
    "error, category",
    [
        (MalformedInputError("bad", line=2, column=5), ErrorCategory.MALFORMED_INPUT),
        (NestingDepthError("a.b", 3), ErrorCategory.MALFORMED_INPUT),
        (UnsupportedValueError("x: unsupported", "x"), ErrorCategory.UNSUPPORTED_VALUE),
        (InputError("gone"), ErrorCategory.IO_FAILURE),
        (OutputError("read-only"), ErrorCategory.IO_FAILURE),
    ],
)
def test_error_categories(error: Exception, category: ErrorCategory) -> None:
    """Every error carries one category and renders it as a prefix."""
    assert error.category is category  # type: ignore[attr-defined]
    assert str(error).startswith(f"{category.value}: ")


def test_nesting_depth_message_names_path() -> None:
    err = NestingDepthError("", 4)
    assert err.path == ""
    assert "<root>" in str(err)
    assert "4 levels" in str(err)


def test_atomic_write_replaces_file(tmp_path: Path) -> None:
    target = tmp_path / "out.toml"
    target.write_text("old\n", encoding="utf-8")

    atomic_write_text(target, "a = 1\r\nb = 2\n")

    # newline="" keeps line endings exactly as given
    assert target.read_bytes() == b"a = 1\r\nb = 2\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.toml"]


def test_atomic_write_missing_directory(tmp_path: Path) -> None:
    """A missing parent directory surfaces as an I/O failure."""
    target = tmp_path / "missing" / "out.toml"
    with pytest.raises(OutputError) as excinfo:
        atomic_write_text(target, "a = 1\n")
    assert excinfo.value.category is ErrorCategory.IO_FAILURE
    assert not target.exists()
