# topmark:header:start
#
#   project      : LitDoc
#   file         : __init__.py
#   file_relpath : src/litdoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for LitDoc.

Configuration is read from ``litdoc.toml`` or ``[tool.litdoc]`` in
``pyproject.toml`` and declares additional converters. Import the loaders
from `litdoc.config.loaders`; this package itself stays import-light so that
`litdoc.config.logging` can be used everywhere.
"""
