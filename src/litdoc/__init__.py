# topmark:header:start
#
#   project      : LitDoc
#   file         : __init__.py
#   file_relpath : src/litdoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc package.

LitDoc is a small literate-documentation toolchain. It converts commented
source files into LitDoc markup (see `litdoc.convert`) and evaluates the
markup's tag vocabulary into a typed document tree (see `litdoc.evaluate`).
"""

from __future__ import annotations
