# topmark:header:start
#
#   project      : LitDoc
#   file         : meta.py
#   file_relpath : src/litdoc/evaluate/meta.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fold metadata markers into their enclosing declaration.

Tags such as ``@returns`` or ``@stability`` evaluate to `Meta` markers that
sit among a declaration's children. `collect_meta` moves them into the
declaration's ``meta`` mapping.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, TypeVar

from litdoc.config.logging import get_logger
from litdoc.evaluate.nodes import Declaration, Meta, Section

if TYPE_CHECKING:
    from litdoc.config.logging import LitdocLogger
    from litdoc.evaluate.nodes import Value

logger: LitdocLogger = get_logger(__name__)

_V = TypeVar("_V")


def collect_meta(node: _V) -> _V:
    """Return ``node`` with the `Meta` markers among its children folded into ``meta``.

    Only `Declaration` and `Section` nodes carry metadata; any other value is
    returned unchanged. Markers are applied in document order on top of the
    existing ``meta`` (later keys win) and removed from ``children``. Nested
    declarations are left alone.

    Args:
        node (_V): The node to fold.

    Returns:
        _V: A new node, or ``node`` itself when there is nothing to fold.
    """
    if not isinstance(node, (Declaration, Section)):
        return node
    markers: list[Meta] = [child for child in node.children if isinstance(child, Meta)]
    if not markers:
        return node

    meta: dict[str, Value] = dict(node.meta)
    for marker in markers:
        meta[str(marker.key)] = marker.value
    children: tuple[Value, ...] = tuple(c for c in node.children if not isinstance(c, Meta))
    logger.debug("Folded %d metadata marker(s) into @%s", len(markers), node.label)
    return dataclasses.replace(node, meta=meta, children=children)  # type: ignore[return-value]
