# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for TomlRecord: codec options, option files and logging.

Submodules:
    * `tomlrecord.config.options`: frozen `CodecOptions` and its mutable builder.
    * `tomlrecord.config.keys`: canonical option key names.
    * `tomlrecord.config.loader`: reading options from ``tomlrecord.toml`` or
      ``pyproject.toml``.
    * `tomlrecord.config.logging`: TRACE level, colored formatter, env overrides.
"""
