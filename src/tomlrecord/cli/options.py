# topmark:header:start
#
#   project      : TomlRecord
#   file         : options.py
#   file_relpath : src/tomlrecord/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, output destination) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Callable, ParamSpec, TypeVar

import click

from tomlrecord.cli.errors import TomlRecordUsageError
from tomlrecord.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        TomlRecordUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TomlRecordUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def resolve_color(*, no_color: bool, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        no_color: Whether ``--no-color`` was passed.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        ``--no-color`` always wins. Then FORCE_COLOR and NO_COLOR environment
        variables are honored. Defaults to enabling color if stdout is a TTY.
    """
    if no_color:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def input_path_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``PATH`` argument (``-`` reads STDIN)."""
    return click.argument("path", type=click.Path(dir_okay=False, allow_dash=True))(f)


def output_path_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-o/--output`` (default: STDOUT)."""
    return click.option(
        "-o",
        "--output",
        "output",
        type=click.Path(dir_okay=False, writable=True, allow_dash=True),
        default=None,
        help="Write the result to this file instead of STDOUT.",
    )(f)
