# topmark:header:start
#
#   project      : TomlRecord
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TomlRecord in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path` before
invoking the Click CLI, so relative paths resolve against the temporary directory
and option-file discovery never picks up the repository's own ``pyproject.toml``.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from tomlrecord.cli.exit_codes import ExitCode
from tomlrecord.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["read", "a.toml"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the
            command (used with the ``-`` path).

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that a CLI invocation exited with `ExitCode.SUCCESS`.

    Args:
        result (Result): The Click test result.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
