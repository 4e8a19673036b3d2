# topmark:header:start
#
#   project      : LitDoc
#   file         : keys.py
#   file_relpath : src/litdoc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for LitDoc configuration.

These strings are the external configuration schema as it appears in
``litdoc.toml`` and in ``[tool.litdoc]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by LitDoc configuration."""

    # [converters.<name>]
    SECTION_CONVERTERS: Final[str] = "converters"

    KEY_PATTERN: Final[str] = "pattern"
    KEY_LANGUAGE: Final[str] = "language"
    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_DESCRIPTION: Final[str] = "description"
