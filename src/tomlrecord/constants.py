# topmark:header:start
#
#   project      : TomlRecord
#   file         : constants.py
#   file_relpath : src/tomlrecord/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TOMLRECORD_VERSION: str = get_version("tomlrecord")

#: Path argument meaning "read from STDIN" / "write to STDOUT" on the command line.
STDIO_PATH: str = "-"

TOML_ENCODING: str = "utf-8"
