# topmark:header:start
#
#   project      : LitDoc
#   file         : nodes.py
#   file_relpath : src/litdoc/evaluate/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document tree node types.

Every tag handler produces one of the immutable node types below (or a
primitive value). Each node type carries a fixed ``LABEL`` naming it in the
document tree; nodes never reference their parent, so a tree is owned
top-down by whoever holds its root.

Sections:
    * Block nodes: `Declaration`, `Section`, `CodeBlock`, `Example`,
      `UnorderedList`, `OrderedList`, `Literal`, `Note`, `VersionNote`.
    * Inline nodes: `Paragraph`, `Text`, `Bold`, `Italic`, `SoftBreak`, `Line`,
      `Link`, `Ref`.
    * Passthrough nodes: `Raw`, `Tag`.
    * Metadata markers: `Meta`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

# Values handled by the evaluation environment: nodes, strings, numbers,
# booleans, sequences and mappings of those.
Value = Any


@dataclass(frozen=True)
class Node:
    """Base class of all document nodes."""

    LABEL: ClassVar[str] = ""

    @property
    def label(self) -> str:
        """Label of this node in the document tree."""
        return self.LABEL


# --- Metadata and passthrough --------------------------------------------------


@dataclass(frozen=True)
class Meta(Node):
    """Metadata marker, folded into the enclosing declaration's ``meta`` mapping."""

    LABEL: ClassVar[str] = "meta"

    key: Value
    value: Value


@dataclass(frozen=True)
class Tag(Node):
    """Generic node whose label is chosen by the document author."""

    LABEL: ClassVar[str] = "tag"

    tag: Value
    value: Value

    @property
    def label(self) -> str:
        """The author-supplied tag."""
        return str(self.tag)


@dataclass(frozen=True)
class Raw(Node):
    """Raw content passed through untouched to the renderer for ``format``."""

    LABEL: ClassVar[str] = "raw"

    format: str
    block: str


# --- Block nodes ----------------------------------------------------------------


@dataclass(frozen=True)
class Declaration(Node):
    """A documented declaration (function, method, class, ...)."""

    LABEL: ClassVar[str] = "declaration"

    kind: str
    children: tuple[Value, ...]
    meta: dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class Section(Node):
    """A titled section of the document."""

    LABEL: ClassVar[str] = "section"

    title: str
    children: tuple[Value, ...]
    meta: dict[str, Value] = field(default_factory=dict)


@dataclass(frozen=True)
class CodeBlock(Node):
    """A block of source code."""

    LABEL: ClassVar[str] = "code"

    language: str
    code: str


@dataclass(frozen=True)
class Example(Node):
    """A code example with display options."""

    LABEL: ClassVar[str] = "example"

    language: str
    code: str
    line_numbers: bool = True
    emphasise_lines: Value = None
    caption: str = "Example"


@dataclass(frozen=True)
class UnorderedList(Node):
    """A bulleted list."""

    LABEL: ClassVar[str] = "list"

    items: tuple[Value, ...]


@dataclass(frozen=True)
class OrderedList(Node):
    """A numbered list."""

    LABEL: ClassVar[str] = "ordered-list"

    items: tuple[Value, ...]


@dataclass(frozen=True)
class Literal(Node):
    """Literal text, rendered verbatim."""

    LABEL: ClassVar[str] = "literal"

    text: str


@dataclass(frozen=True)
class Note(Node):
    """An admonition; ``kind`` is ``"note"`` or ``"warning"``."""

    LABEL: ClassVar[str] = "note"

    kind: str
    text: str


@dataclass(frozen=True)
class VersionNote(Node):
    """A version annotation; ``kind`` is ``"added"``, ``"changed"`` or ``"deprecated"``."""

    LABEL: ClassVar[str] = "version-note"

    kind: str
    version: str
    text: str = ""


# --- Inline nodes ---------------------------------------------------------------


@dataclass(frozen=True)
class Link(Node):
    """A hyperlink."""

    LABEL: ClassVar[str] = "link"

    url: Value
    text: Value


@dataclass(frozen=True)
class Ref(Node):
    """A named reference to a link target."""

    LABEL: ClassVar[str] = "ref"

    id: str
    url: str


@dataclass(frozen=True)
class Inline(Node):
    """Base class of inline formatting nodes wrapping a single value."""

    value: Value


@dataclass(frozen=True)
class Paragraph(Inline):
    LABEL: ClassVar[str] = "paragraph"


@dataclass(frozen=True)
class Text(Inline):
    LABEL: ClassVar[str] = "text"


@dataclass(frozen=True)
class Bold(Inline):
    LABEL: ClassVar[str] = "bold"


@dataclass(frozen=True)
class Italic(Inline):
    LABEL: ClassVar[str] = "italic"


@dataclass(frozen=True)
class SoftBreak(Inline):
    LABEL: ClassVar[str] = "soft-break"


@dataclass(frozen=True)
class Line(Inline):
    LABEL: ClassVar[str] = "line"
