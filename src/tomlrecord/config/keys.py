# topmark:header:start
#
#   project      : TomlRecord
#   file         : keys.py
#   file_relpath : src/tomlrecord/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for TomlRecord option files.

Options live at the top level of ``tomlrecord.toml`` or under ``[tool.tomlrecord]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Option file names, section names and keys."""

    # Discovery
    FILE_TOMLRECORD: Final[str] = "tomlrecord.toml"
    FILE_PYPROJECT: Final[str] = "pyproject.toml"
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOMLRECORD: Final[str] = "tomlrecord"

    # Codec options
    KEY_MULTILINE_STRINGS: Final[str] = "multiline_strings"
    KEY_NARROW_INTEGRAL_FLOATS: Final[str] = "narrow_integral_floats"
    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_STRICT: Final[str] = "strict"
    KEY_SECTION_SPACING: Final[str] = "section_spacing"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_MULTILINE_STRINGS,
            KEY_NARROW_INTEGRAL_FLOATS,
            KEY_MAX_DEPTH,
            KEY_STRICT,
            KEY_SECTION_SPACING,
        }
    )
