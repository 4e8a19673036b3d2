# topmark:header:start
#
#   project      : LitDoc
#   file         : guards.py
#   file_relpath : src/litdoc/config/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for TOML parsing.

`TypeGuard`-based predicates that narrow values coming out of `tomlkit`
(after ``unwrap()``) to the plain-Python shapes used by the config layer.
"""

from __future__ import annotations

from typing import Any, TypeGuard

TomlTable = dict[str, Any]


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value; item types are not checked."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return ``table[key]`` if it is a sub-table, else an empty dict."""
    value: Any = table.get(key)
    return value if is_toml_table(value) else {}
