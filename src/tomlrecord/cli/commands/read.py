# topmark:header:start
#
#   project      : TomlRecord
#   file         : read.py
#   file_relpath : src/tomlrecord/cli/commands/read.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord `read` command.

Parses a TOML file (or STDIN) and prints the resulting host record, as JSON or as
an indented outline showing how each value was typed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tomlrecord.api import loads
from tomlrecord.cli.cli_types import EnumChoiceParam, OutputFormat
from tomlrecord.cli.cmd_common import (
    codec_errors,
    emit_text,
    get_codec_options,
    read_input_text,
    report_diagnostics,
)
from tomlrecord.cli.options import input_path_argument, output_path_option
from tomlrecord.cli.render import render_json, render_outline
from tomlrecord.config.logging import get_logger
from tomlrecord.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger
    from tomlrecord.config.options import CodecOptions
    from tomlrecord.host.types import Record

logger: TomlRecordLogger = get_logger(__name__)


@click.command(
    name="read",
    help=(
        "Parse a TOML file ('-' for STDIN) and print the host record. "
        "In JSON output, nan and inf floats are printed as strings."
    ),
)
@input_path_argument
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.JSON.value,
    show_default=True,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@output_path_option
def read_command(
    *,
    path: str,
    output_format: OutputFormat,
    output: str | None,
) -> None:
    """Print the host record read from a TOML document.

    Args:
        path (str): Input file, or ``-`` for STDIN.
        output_format (OutputFormat): ``json`` or ``text``.
        output (str | None): Destination file; STDOUT when unset.
    """
    ctx = click.get_current_context()
    options: CodecOptions = get_codec_options(ctx)
    diagnostics = DiagnosticLog()

    text: str = read_input_text(path)
    with codec_errors():
        record: Record = loads(text, options, diagnostics)
    logger.debug("Read %d top-level fields from %s", len(record), path)

    report_diagnostics(ctx, diagnostics)
    if output_format is OutputFormat.TEXT:
        emit_text(ctx, render_outline(record, options), output)
    else:
        emit_text(ctx, render_json(record), output)
