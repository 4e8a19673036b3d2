# topmark:header:start
#
#   project      : LitDoc
#   file         : contracts.py
#   file_relpath : src/litdoc/evaluate/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument contracts for tag handlers.

Values reach the evaluation environment untyped, straight from the markup
parser. This module is the single place where they are checked:

* `TypeGuard` predicates (`is_string`, `is_number`, ...) narrow raw values;
* `Arguments` holds the values bound to one tag invocation and exposes typed
  accessors that raise `ContractViolation` on missing or ill-shaped fields;
* `structurally_equal` implements the deep equality used by the ``=`` tag.

Handlers only ever see values returned by these accessors.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Final, TypeGuard

from litdoc.errors import ContractViolation
from litdoc.evaluate.nodes import Node

_MISSING: Final[Any] = object()


# --- Type guards ----------------------------------------------------------------


def is_string(obj: object) -> TypeGuard[str]:
    """Return True if ``obj`` is a ``str``."""
    return isinstance(obj, str)


def is_number(obj: object) -> TypeGuard[int | float]:
    """Return True if ``obj`` is an ``int`` or ``float`` (booleans excluded)."""
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def is_boolean(obj: object) -> TypeGuard[bool]:
    """Return True if ``obj`` is exactly ``True`` or ``False``."""
    return isinstance(obj, bool)


def is_sequence(obj: object) -> TypeGuard[Sequence[Any]]:
    """Return True for list-like sequences.

    Strings and bytes are sequences to Python but scalars to the markup, so
    they are excluded.
    """
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_node(obj: object) -> TypeGuard[Node]:
    """Return True if ``obj`` is a document node."""
    return isinstance(obj, Node)


def _describe(value: object) -> str:
    if is_node(value):
        return f"@{value.label} node"
    if is_sequence(value):
        return f"sequence of length {len(value)}"
    return type(value).__name__


# --- Structural equality --------------------------------------------------------


def structurally_equal(left: object, right: object) -> bool:
    """Deep structural equality over markup values.

    Sequences compare element-wise regardless of their concrete type,
    mappings compare key-wise, nodes compare by type and fields, and booleans
    are never equal to numbers.
    """
    if is_boolean(left) or is_boolean(right):
        return is_boolean(left) and is_boolean(right) and left is right
    if is_node(left) or is_node(right):
        if type(left) is not type(right):
            return False
        return all(
            structurally_equal(getattr(left, f.name), getattr(right, f.name))
            for f in dataclasses.fields(left)  # type: ignore[arg-type]
        )
    if is_sequence(left) or is_sequence(right):
        if not (is_sequence(left) and is_sequence(right)) or len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        if set(left) != set(right):
            return False
        return all(structurally_equal(left[k], right[k]) for k in left)
    return bool(left == right)


# --- Bound arguments ------------------------------------------------------------


class Arguments(Mapping[str, Any]):
    """Arguments bound to one tag invocation, keyed by parameter name.

    Accessors validate on read and raise `ContractViolation` (naming the tag
    and field) when a required field is absent or has the wrong shape.
    Optional fields take a ``default`` that is returned when the field was
    not bound.
    """

    def __init__(self, tag: str, values: Mapping[str, Any] | None = None) -> None:
        self.tag: str = tag
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Arguments({self.tag!r}, {self._values!r})"

    def violation(self, message: str, field: str | None = None) -> ContractViolation:
        """Build a contract violation for this invocation."""
        return ContractViolation(self.tag, message, field=field)

    def value(self, name: str, default: Any = _MISSING) -> Any:
        """Return the field ``name`` whatever its type."""
        if name in self._values:
            return self._values[name]
        if default is _MISSING:
            raise self.violation("missing required argument", name)
        return default

    def string(self, name: str, default: Any = _MISSING) -> str:
        """Return the field ``name``, which must be a string."""
        value: Any = self.value(name, default)
        if not is_string(value):
            raise self.violation(f"expected a string, got {_describe(value)}", name)
        return value

    def number(self, name: str) -> int | float:
        """Return the field ``name``, which must be a number."""
        value: Any = self.value(name)
        if not is_number(value):
            raise self.violation(f"expected a number, got {_describe(value)}", name)
        return value

    def boolean(self, name: str, default: Any = _MISSING) -> bool:
        """Return the field ``name``, which must be a boolean."""
        value: Any = self.value(name, default)
        if not is_boolean(value):
            raise self.violation(f"expected a boolean, got {_describe(value)}", name)
        return value

    def sequence(self, name: str) -> tuple[Any, ...]:
        """Return the field ``name``, which must be a sequence, as a tuple."""
        value: Any = self.value(name)
        if not is_sequence(value):
            raise self.violation(f"expected a sequence, got {_describe(value)}", name)
        return tuple(value)

    def node(self, name: str) -> Node:
        """Return the field ``name``, which must be a document node."""
        value: Any = self.value(name)
        if not is_node(value):
            raise self.violation(f"expected a node, got {_describe(value)}", name)
        return value
