# topmark:header:start
#
#   project      : TomlRecord
#   file         : main.py
#   file_relpath : src/tomlrecord/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord command line interface.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Codec options are resolved once: option file first, then CLI flags on top.
- Subcommands fetch the console and the options from ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tomlrecord.cli.commands.normalize import normalize_command
from tomlrecord.cli.commands.read import read_command
from tomlrecord.cli.commands.version import version_command
from tomlrecord.cli.commands.write import write_command
from tomlrecord.cli.console import ClickConsole
from tomlrecord.cli.errors import TomlRecordConfigError
from tomlrecord.cli.options import common_verbose_options, resolve_color, resolve_verbosity
from tomlrecord.config.loader import ConfigError, discover_options, load_options
from tomlrecord.config.logging import get_logger, resolve_env_log_level, setup_logging
from tomlrecord.config.options import MutableCodecOptions

if TYPE_CHECKING:
    from tomlrecord.cli.console import ConsoleLike
    from tomlrecord.config.logging import TomlRecordLogger

logger: TomlRecordLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # TOMLRECORD_LOG_LEVEL wins over -v/-q
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env or level_cli
    setup_logging(level=ctx.obj["log_level"])

    enable_color: bool = resolve_color(no_color=no_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def init_codec_options(ctx: click.Context, *, config: str | None, strict: bool) -> None:
    """Resolve codec options into ``ctx.obj["codec_options"]``.

    Raises:
        TomlRecordConfigError: If the option file is unreadable or invalid.
    """
    try:
        from_file: MutableCodecOptions = (
            load_options(config) if config is not None else discover_options(".")
        )
    except ConfigError as exc:
        raise TomlRecordConfigError(str(exc)) from exc

    from_cli = MutableCodecOptions(strict=True if strict else None)
    ctx.obj["codec_options"] = from_file.merge_with(from_cli).freeze()
    logger.debug("Codec options: %r", ctx.obj["codec_options"])


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TomlRecord CLI: convert between TOML documents and ordered records.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@click.option(
    "--config",
    "config",
    type=click.Path(dir_okay=False),
    default=None,
    help="Option file (tomlrecord.toml or pyproject.toml). Default: discovered in CWD.",
)
@click.option(
    "--strict",
    "strict",
    is_flag=True,
    help="Fail on values without a TOML mapping instead of skipping them.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config: str | None,
    strict: bool,
) -> None:
    """Entry point for the TomlRecord CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    init_codec_options(ctx, config=config, strict=strict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tomlrecord read FILE' to print a TOML file as a record.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(read_command)

cli.add_command(write_command)

cli.add_command(normalize_command)

if __name__ == "__main__":
    cli()
