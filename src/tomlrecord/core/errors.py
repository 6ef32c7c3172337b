# topmark:header:start
#
#   project      : TomlRecord
#   file         : errors.py
#   file_relpath : src/tomlrecord/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TomlRecord codec.

Every failure carries exactly one [`ErrorCategory`][tomlrecord.core.errors.ErrorCategory]
and a descriptive message. ``str(err)`` renders as ``"<category>: <message>"``.

Malformed input and I/O failures are always fatal. Unsupported values are skipped
(and recorded as diagnostics) unless the codec runs in strict mode, in which case
[`UnsupportedValueError`][tomlrecord.core.errors.UnsupportedValueError] is raised.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Named failure categories reported at the codec boundary."""

    MALFORMED_INPUT = "malformed input"
    UNSUPPORTED_VALUE = "unsupported value"
    IO_FAILURE = "I/O failure"


class TomlRecordError(Exception):
    """Base class for all TomlRecord errors.

    Attributes:
        message: Human-readable description of the failure.
        category: The failure category.
    """

    default_category: ErrorCategory = ErrorCategory.MALFORMED_INPUT

    def __init__(self, message: str, category: ErrorCategory | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category or self.default_category

    def __str__(self) -> str:
        return f"{self.category.value}: {self.message}"


class MalformedInputError(TomlRecordError):
    """The TOML text could not be parsed into a document tree.

    Attributes:
        line: 1-based line reported by the parser, if known.
        column: 1-based column reported by the parser, if known.
    """

    default_category = ErrorCategory.MALFORMED_INPUT

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line: int | None = line
        self.column: int | None = column


class NestingDepthError(TomlRecordError):
    """A table/array tree nests deeper than the configured limit."""

    default_category = ErrorCategory.MALFORMED_INPUT

    def __init__(self, path: str, max_depth: int) -> None:
        super().__init__(f"nesting deeper than {max_depth} levels at '{path or '<root>'}'")
        self.path: str = path
        self.max_depth: int = max_depth


class UnsupportedValueError(TomlRecordError):
    """A value has no defined mapping (raised in strict mode only).

    Attributes:
        path: Dotted path of the offending field.
    """

    default_category = ErrorCategory.UNSUPPORTED_VALUE

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path: str = path


class InputError(TomlRecordError):
    """The source file could not be read."""

    default_category = ErrorCategory.IO_FAILURE


class OutputError(TomlRecordError):
    """The destination could not be written."""

    default_category = ErrorCategory.IO_FAILURE
