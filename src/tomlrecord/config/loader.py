# topmark:header:start
#
#   project      : TomlRecord
#   file         : loader.py
#   file_relpath : src/tomlrecord/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load codec options from ``tomlrecord.toml`` or ``pyproject.toml``.

Parsing is done with `tomlkit` and unwrapped to plain ``dict`` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tomlrecord.config.keys import Toml
from tomlrecord.config.logging import get_logger
from tomlrecord.config.options import MutableCodecOptions

if TYPE_CHECKING:
    from tomlrecord.config.logging import TomlRecordLogger

logger: TomlRecordLogger = get_logger(__name__)


class ConfigError(Exception):
    """An option file could not be read or holds invalid values."""


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file into a plain dict.

    Args:
        path: Path to the TOML file.

    Returns:
        The parsed table.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read option file {path}: {exc}") from exc
    try:
        data: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        raise ConfigError(f"Invalid TOML in option file {path}: {exc}") from exc
    logger.debug("Loaded option file %s", path)
    return data


def extract_options_table(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    """Return the options table of a parsed option file.

    ``pyproject.toml`` keeps options under ``[tool.tomlrecord]``; any other file
    keeps them at the top level.
    """
    if path.name != Toml.FILE_PYPROJECT:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_TOMLRECORD, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.tomlrecord] in {path} must be a table")
    return section


def load_options(path: Path | str) -> MutableCodecOptions:
    """Read codec options from an option file.

    Args:
        path: ``tomlrecord.toml``, ``pyproject.toml`` or any TOML file with top-level
            option keys.

    Returns:
        The explicitly set options (unset fields are ``None``).

    Raises:
        ConfigError: If the file is unreadable, malformed, or holds invalid values.
    """
    path = Path(path)
    table: dict[str, Any] = extract_options_table(path, load_toml_dict(path))
    try:
        return MutableCodecOptions.from_toml_table(table)
    except ValueError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def discover_options(directory: Path | str = ".") -> MutableCodecOptions:
    """Load options from the first option file found in ``directory``.

    ``tomlrecord.toml`` takes precedence over ``pyproject.toml``. Returns empty
    options when neither exists.
    """
    base = Path(directory)
    for name in (Toml.FILE_TOMLRECORD, Toml.FILE_PYPROJECT):
        candidate: Path = base / name
        if candidate.is_file():
            logger.info("Using option file %s", candidate)
            return load_options(candidate)
    return MutableCodecOptions()
