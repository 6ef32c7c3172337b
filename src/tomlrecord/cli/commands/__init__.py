# topmark:header:start
#
#   project      : TomlRecord
#   file         : __init__.py
#   file_relpath : src/tomlrecord/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlRecord CLI subcommands."""
