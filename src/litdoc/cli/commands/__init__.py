# topmark:header:start
#
#   project      : LitDoc
#   file         : __init__.py
#   file_relpath : src/litdoc/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc CLI subcommands."""
