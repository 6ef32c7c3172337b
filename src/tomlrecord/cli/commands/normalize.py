# topmark:header:start
#
#   project      : TomlRecord
#   file         : normalize.py
#   file_relpath : src/tomlrecord/cli/commands/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord `normalize` command.

Round-trips a TOML document through the host record model: field order, integer
bases and offsets survive; comments and layout are normalized away.
"""

from __future__ import annotations

import click

from tomlrecord.api import dumps, loads
from tomlrecord.cli.cmd_common import (
    codec_errors,
    emit_text,
    get_codec_options,
    read_input_text,
    report_diagnostics,
)
from tomlrecord.cli.options import input_path_argument, output_path_option
from tomlrecord.config.options import CodecOptions
from tomlrecord.core.diagnostics import DiagnosticLog


@click.command(
    name="normalize",
    help="Re-emit a TOML file ('-' for STDIN) in canonical layout.",
)
@input_path_argument
@output_path_option
def normalize_command(*, path: str, output: str | None) -> None:
    """Read TOML, then write it back through the ordered writer."""
    ctx = click.get_current_context()
    options: CodecOptions = get_codec_options(ctx)
    diagnostics = DiagnosticLog()

    text: str = read_input_text(path)
    with codec_errors():
        result: str = dumps(loads(text, options, diagnostics), options, diagnostics)
    report_diagnostics(ctx, diagnostics)
    emit_text(ctx, result, output)
