# topmark:header:start
#
#   project      : LitDoc
#   file         : __init__.py
#   file_relpath : src/litdoc/evaluate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Evaluate LitDoc markup tags into a typed document tree."""

from __future__ import annotations

from litdoc.errors import ContractViolation, RangeViolation
from litdoc.evaluate.contracts import Arguments, structurally_equal
from litdoc.evaluate.environment import (
    Applicative,
    build_environment,
    get_environment,
    invoke,
    lookup,
)
from litdoc.evaluate.meta import collect_meta
from litdoc.evaluate.nodes import (
    Bold,
    CodeBlock,
    Declaration,
    Example,
    Inline,
    Italic,
    Line,
    Link,
    Literal,
    Meta,
    Node,
    Note,
    OrderedList,
    Paragraph,
    Raw,
    Ref,
    Section,
    SoftBreak,
    Tag,
    Text,
    UnorderedList,
    VersionNote,
)
from litdoc.evaluate.signatures import parse_class_signature, parse_function_signature
from litdoc.evaluate.tags import STABILITY_LEVELS, TagKind, evaluate

__all__ = [
    "STABILITY_LEVELS",
    "Applicative",
    "Arguments",
    "Bold",
    "CodeBlock",
    "ContractViolation",
    "Declaration",
    "Example",
    "Inline",
    "Italic",
    "Line",
    "Link",
    "Literal",
    "Meta",
    "Node",
    "Note",
    "OrderedList",
    "Paragraph",
    "RangeViolation",
    "Raw",
    "Ref",
    "Section",
    "SoftBreak",
    "Tag",
    "TagKind",
    "Text",
    "UnorderedList",
    "VersionNote",
    "build_environment",
    "collect_meta",
    "evaluate",
    "get_environment",
    "invoke",
    "lookup",
    "parse_class_signature",
    "parse_function_signature",
    "structurally_equal",
]
