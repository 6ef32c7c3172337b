# topmark:header:start
#
#   project      : TomlRecord
#   file         : version.py
#   file_relpath : src/tomlrecord/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord `version` command.

Prints the current TomlRecord version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from tomlrecord.cli.cli_types import EnumChoiceParam, OutputFormat
from tomlrecord.cli.cmd_common import get_console
from tomlrecord.constants import TOMLRECORD_VERSION


@click.command(
    name="version",
    help="Show the current version of TomlRecord.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TomlRecord.

    Args:
        output_format (OutputFormat | None): ``json`` for a JSON object, plain text otherwise.
    """
    console = get_console(click.get_current_context())
    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": TOMLRECORD_VERSION}))
    else:
        console.print(console.styled(TOMLRECORD_VERSION, bold=True))
