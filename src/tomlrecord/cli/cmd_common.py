# topmark:header:start
#
#   project      : TomlRecord
#   file         : cmd_common.py
#   file_relpath : src/tomlrecord/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the commands: fetching state from ``ctx.obj``, reading the
input (file or STDIN), writing the output (file or STDOUT), reporting diagnostics,
and translating codec errors into CLI errors.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlrecord.cli.errors import (
    TomlRecordFileNotFoundError,
    TomlRecordIOError,
    TomlRecordMalformedInputError,
    cli_error_from,
)
from tomlrecord.config.logging import get_logger
from tomlrecord.config.options import CodecOptions
from tomlrecord.constants import STDIO_PATH, TOML_ENCODING
from tomlrecord.core.errors import TomlRecordError
from tomlrecord.core.files import atomic_write_text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tomlrecord.cli.console import ConsoleLike
    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.core.diagnostics import DiagnosticLog

logger: TomlRecordLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_codec_options(ctx: click.Context) -> CodecOptions:
    """Return the resolved codec options (defaults when the group did not set any)."""
    ctx.ensure_object(dict)
    return ctx.obj.get("codec_options") or CodecOptions()


@contextmanager
def codec_errors() -> Iterator[None]:
    """Translate `TomlRecordError` raised inside the block into CLI errors."""
    try:
        yield
    except TomlRecordError as exc:
        logger.debug("Codec error: %r", exc)
        raise cli_error_from(exc) from exc


def read_input_text(path: str) -> str:
    """Read the command input; ``-`` reads STDIN.

    Raises:
        TomlRecordFileNotFoundError: If the file does not exist.
        TomlRecordMalformedInputError: If the input is not valid UTF-8.
        TomlRecordIOError: On any other read failure.
    """
    if path == STDIO_PATH:
        stream = click.get_text_stream("stdin", encoding=TOML_ENCODING)
        try:
            return stream.read()
        except UnicodeDecodeError as exc:
            raise TomlRecordMalformedInputError(f"STDIN is not valid UTF-8: {exc}") from exc

    source = Path(path)
    try:
        return source.read_text(encoding=TOML_ENCODING)
    except FileNotFoundError as exc:
        raise TomlRecordFileNotFoundError(f"File not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise TomlRecordMalformedInputError(f"{source} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise TomlRecordIOError(f"Cannot read {source}: {exc}") from exc


def emit_text(ctx: click.Context, text: str, output: str | None) -> None:
    """Print ``text`` to STDOUT, or write it atomically to ``output``."""
    if output is None or output == STDIO_PATH:
        get_console(ctx).print(text, nl=False)
        return
    with codec_errors():
        atomic_write_text(output, text, TOML_ENCODING)


def report_diagnostics(ctx: click.Context, diagnostics: DiagnosticLog) -> None:
    """Print one line per collected diagnostic to stderr."""
    console: ConsoleLike = get_console(ctx)
    for diag in diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")
