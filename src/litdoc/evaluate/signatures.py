# topmark:header:start
#
#   project      : LitDoc
#   file         : signatures.py
#   file_relpath : src/litdoc/evaluate/signatures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse declaration signatures into declaration metadata.

Function-style signatures look like ``name(params)``; class-style signatures
may add a parent list: ``Name(params) < Parent, Other``. Signatures that do
not match are kept whole, with the full text as the name.
"""

from __future__ import annotations

import re
from typing import Final

_RE_FUNCTION: Final[re.Pattern[str]] = re.compile(r"^(.+?)(\(.*\))")
_RE_CLASS: Final[re.Pattern[str]] = re.compile(r"^(.+?)(\(.*?\))\s*<\s*(.+)$")


def parse_function_signature(signature: str) -> dict[str, str]:
    """Parse a function-style signature.

    Args:
        signature (str): Signature text, e.g. ``"foo(a, b)"``.

    Returns:
        dict[str, str]: ``name`` (text before the first parameter group) and
        ``signature`` (the input, unchanged).
    """
    match = _RE_FUNCTION.match(signature)
    if match is None:
        return {"name": signature, "signature": signature}
    return {"name": match.group(1), "signature": signature}


def parse_class_signature(signature: str) -> dict[str, str]:
    """Parse a class-style signature with an optional ``< parents`` suffix.

    Returns:
        dict[str, str]: The function-style result when there is no parent list;
        otherwise ``name``, ``signature`` (name and parameter group only) and
        ``parents`` (the raw parent list text).
    """
    match = _RE_CLASS.match(signature)
    if match is None:
        return parse_function_signature(signature)
    name, params, parents = match.groups()
    return {"name": name, "signature": name + params, "parents": parents}
