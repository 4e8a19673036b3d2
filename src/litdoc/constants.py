# topmark:header:start
#
#   project      : LitDoc
#   file         : constants.py
#   file_relpath : src/litdoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LITDOC_VERSION: str = get_version("litdoc")

# Configuration discovery (relative to the working directory):
LITDOC_TOML_NAME: str = "litdoc.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.litdoc"

# Suffix used when writing converted files to an output directory:
MARKUP_SUFFIX: str = ".ldoc"

