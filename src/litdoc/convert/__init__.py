# topmark:header:start
#
#   project      : LitDoc
#   file         : __init__.py
#   file_relpath : src/litdoc/convert/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Convert commented source files into LitDoc markup."""

from __future__ import annotations

from litdoc.convert.classify import (
    Blank,
    Code,
    Doc,
    LineClassification,
    assimilate,
    classify,
    convert,
    merge,
    render,
    split_lines,
)
from litdoc.convert.converters import (
    POUND_CONVERTER,
    SLASH_CONVERTER,
    Converter,
    convert_pound,
    convert_slash,
)
from litdoc.convert.registry import (
    converter_for_path,
    get_converter,
    get_converter_registry,
    register_converter,
    reset_converter_registry,
    unregister_converter,
)

__all__ = [
    "POUND_CONVERTER",
    "SLASH_CONVERTER",
    "Blank",
    "Code",
    "Converter",
    "Doc",
    "LineClassification",
    "assimilate",
    "classify",
    "convert",
    "convert_pound",
    "convert_slash",
    "converter_for_path",
    "get_converter",
    "get_converter_registry",
    "merge",
    "register_converter",
    "render",
    "reset_converter_registry",
    "split_lines",
    "unregister_converter",
]
