# topmark:header:start
#
#   project      : TomlRecord
#   file         : errors.py
#   file_relpath : src/tomlrecord/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TomlRecord CLI.

Commands raise these (or let `cli_error_from` translate codec errors) so that each
failure exits with a standardized code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tomlrecord.cli.exit_codes import ExitCode
from tomlrecord.core.errors import (
    ErrorCategory,
    InputError,
    TomlRecordError,
    UnsupportedValueError,
)


class TomlRecordCliError(click.ClickException):
    """Base class for all TomlRecord CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class TomlRecordUsageError(TomlRecordCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TomlRecordMalformedInputError(TomlRecordCliError):
    """Error for input that is not valid TOML/JSON or not valid UTF-8."""

    exit_code = ExitCode.MALFORMED_INPUT


class TomlRecordFileNotFoundError(TomlRecordCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TomlRecordUnsupportedValueError(TomlRecordCliError):
    """Error for values without a mapping in strict mode."""

    exit_code = ExitCode.UNSUPPORTED_VALUE


class TomlRecordIOError(TomlRecordCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TomlRecordConfigError(TomlRecordCliError):
    """Error for unreadable or invalid option files."""

    exit_code = ExitCode.CONFIG_ERROR


def cli_error_from(exc: TomlRecordError) -> TomlRecordCliError:
    """Translate a codec error into the CLI error carrying the matching exit code."""
    message: str = str(exc)
    if isinstance(exc, UnsupportedValueError):
        return TomlRecordUnsupportedValueError(message)
    if isinstance(exc, InputError) or exc.category is ErrorCategory.IO_FAILURE:
        return TomlRecordIOError(message)
    return TomlRecordMalformedInputError(message)
