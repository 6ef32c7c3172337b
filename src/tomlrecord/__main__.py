# topmark:header:start
#
#   project      : TomlRecord
#   file         : __main__.py
#   file_relpath : src/tomlrecord/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TomlRecord via ``python -m tomlrecord``.

Equivalent to running the ``tomlrecord`` console script.

Examples:
    Print a TOML file as JSON::

        python -m tomlrecord read config.toml
"""

from __future__ import annotations

from tomlrecord.cli.main import cli

if __name__ == "__main__":
    cli()
