# topmark:header:start
#
#   project      : TomlRecord
#   file         : write.py
#   file_relpath : src/tomlrecord/cli/commands/write.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord `write` command.

Reads a host record encoded as a JSON object and emits it as TOML, scalars before
tables. JSON ``null`` values have no TOML form: they are skipped with a warning
(or rejected with ``--strict``).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from tomlrecord.api import dumps
from tomlrecord.cli.cmd_common import (
    codec_errors,
    emit_text,
    get_codec_options,
    read_input_text,
    report_diagnostics,
)
from tomlrecord.cli.errors import TomlRecordMalformedInputError
from tomlrecord.cli.options import input_path_argument, output_path_option
from tomlrecord.core.diagnostics import DiagnosticLog


@click.command(
    name="write",
    help="Convert a JSON object ('-' for STDIN) to TOML.",
)
@input_path_argument
@output_path_option
def write_command(*, path: str, output: str | None) -> None:
    """Emit TOML for a host record given as JSON."""
    ctx = click.get_current_context()
    diagnostics = DiagnosticLog()

    try:
        record: Any = json.loads(read_input_text(path))
    except json.JSONDecodeError as exc:
        raise TomlRecordMalformedInputError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(record, dict):
        raise TomlRecordMalformedInputError(
            f"JSON root must be an object, got {type(record).__name__}"
        )

    with codec_errors():
        text: str = dumps(record, get_codec_options(ctx), diagnostics)
    report_diagnostics(ctx, diagnostics)
    emit_text(ctx, text, output)
