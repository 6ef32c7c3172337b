# topmark:header:start
#
#   project      : TomlRecord
#   file         : logging.py
#   file_relpath : src/tomlrecord/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for TomlRecord: a TRACE level, colored records, and a single stderr handler.

The codec logs every skipped (unsupported) value at DEBUG and every table it walks
at TRACE, so ``TOMLRECORD_LOG_LEVEL=TRACE`` shows the full read/write walk.

STDOUT carries the TOML or JSON produced by the CLI, so log records always go to
stderr (or to an explicit stream).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "TOMLRECORD_LOG_LEVEL"

#: Level used when neither the CLI nor the environment asks for one.
DEFAULT_LOG_LEVEL: Final[int] = logging.CRITICAL

_LEVEL_BY_NAME: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Highest threshold first; a record takes the style of the first threshold it reaches.
_STYLE_BY_THRESHOLD: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red_bright),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_BRIEF_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
_DETAILED_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class TomlRecordLogger(logging.Logger):
    """Logger with a ``trace()`` method for the level below DEBUG."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(TomlRecordLogger)


class ChalkFormatter(logging.Formatter):
    """Formats records with `yachalk` colors chosen by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record, colored for its level."""
        text: str = super().format(record)
        for threshold, style in _STYLE_BY_THRESHOLD:
            if record.levelno >= threshold:
                return style(text)
        return text


class _TomlRecordHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker class so `setup_logging` only replaces the handler it installed."""


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TOMLRECORD_LOG_LEVEL``, or None.

    Accepts level names (``TRACE``, ``debug``, ...) and numeric levels (``10``).
    Unset, empty or unrecognized values yield None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw in _LEVEL_BY_NAME:
        return _LEVEL_BY_NAME[raw]
    try:
        return int(raw)
    except ValueError:
        return None


def setup_logging(level: int | None = None, stream: IO[str] | None = None) -> None:
    """Install the TomlRecord handler on the root logger.

    Args:
        level: Log level; defaults to the environment level, then CRITICAL.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or DEFAULT_LOG_LEVEL

    root: logging.Logger = logging.getLogger()
    for installed in [h for h in root.handlers if isinstance(h, _TomlRecordHandler)]:
        root.removeHandler(installed)

    handler = _TomlRecordHandler(stream or sys.stderr)
    # File and line numbers only help when debugging
    fmt: str = _BRIEF_FORMAT if level >= logging.INFO else _DETAILED_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> TomlRecordLogger:
    """Return the `TomlRecordLogger` registered under ``name``."""
    return cast("TomlRecordLogger", logging.getLogger(name))
