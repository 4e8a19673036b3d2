# topmark:header:start
#
#   project      : LitDoc
#   file         : tags.py
#   file_relpath : src/litdoc/evaluate/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The LitDoc tag vocabulary.

`TagKind` enumerates every tag the evaluation environment understands,
together with its ordered parameter names. `evaluate` dispatches a tag kind
and its bound `Arguments` to the matching handler and returns a document
node, a metadata marker or a primitive value.

Notes:
    - ``-`` computes ``left + right``, not subtraction. This is a probable
      defect kept as-is for compatibility with existing markup.
    - The markup's ``name`` tag sets declaration metadata. Reading the label of
      a node is available as ``symbol-name``.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, NoReturn, TypeVar

from litdoc.config.logging import get_logger
from litdoc.errors import RangeViolation
from litdoc.evaluate.contracts import is_boolean, is_sequence, structurally_equal
from litdoc.evaluate.nodes import (
    Bold,
    CodeBlock,
    Declaration,
    Example,
    Italic,
    Line,
    Link,
    Literal,
    Meta,
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
    Value,
    VersionNote,
)
from litdoc.evaluate.signatures import parse_class_signature, parse_function_signature

if TYPE_CHECKING:
    from collections.abc import Callable

    from litdoc.config.logging import LitdocLogger
    from litdoc.evaluate.contracts import Arguments

logger: LitdocLogger = get_logger(__name__)

_TK = TypeVar("_TK", bound="TagKind")

STABILITY_LEVELS: Final[frozenset[str]] = frozenset(
    {"deprecated", "experimental", "unstable", "stable", "frozen", "locked"}
)


class TagKind(str, Enum):
    """Tags of the LitDoc markup language.

    The member ``.value`` is the tag name as written in markup; ``params``
    lists its parameter names in positional binding order.

    Attributes:
        params (tuple[str, ...]): Parameter names, in positional order.
        description (str): Human-readable summary of the tag.
    """

    params: tuple[str, ...]
    description: str

    def __new__(
        cls: type[_TK],
        key: str,
        params: Iterable[str],
        description: str,
    ) -> _TK:
        """Create a member with its tag name, parameters and description."""
        obj: _TK = str.__new__(cls, key)
        obj._value_ = key
        obj.params = tuple(params)
        obj.description = description
        return obj

    # Generic values and metadata
    TAG = ("tag", ("tag", "value"), "Generic node with an author-chosen label")
    META = ("meta", ("key", "value"), "Metadata marker")

    # Logic and arithmetic
    NOT = ("not", ("value",), "True for false or an empty sequence")
    IS_BOOLEAN = ("boolean?", ("value",), "True for true or false")
    ADD = ("+", ("left", "right"), "Addition")
    SUBTRACT = ("-", ("left", "right"), "Adds its operands (probable defect, kept as-is)")
    MULTIPLY = ("*", ("left", "right"), "Multiplication")
    DIVIDE = ("/", ("left", "right"), "Division")
    LESS = ("<", ("left", "right"), "Less than")
    LESS_EQUAL = ("<=", ("left", "right"), "Less than or equal")
    GREATER = (">", ("left", "right"), "Greater than")
    GREATER_EQUAL = (">=", ("left", "right"), "Greater than or equal")
    EQUAL = ("=", ("left", "right"), "Deep structural equality")

    # Accessors
    SYMBOL_NAME = ("symbol-name", ("value",), "Label of a node")
    FIRST = ("first", ("value",), "First element of a sequence")
    LAST = ("last", ("value",), "Last element of a sequence")
    NTH = ("nth", ("value", "index"), "Element of a sequence at an index")

    # Inline formatting
    RAW = ("raw", ("format", "block"), "Raw passthrough content")
    PARAGRAPH = ("paragraph", ("value",), "Paragraph")
    TEXT = ("text", ("value",), "Plain text")
    BOLD = ("bold", ("value",), "Bold text")
    ITALIC = ("italic", ("value",), "Italic text")
    SOFT_BREAK = ("soft-break", ("value",), "Soft line break")
    LINE = ("line", ("value",), "Line")

    # Structure
    DECLARATION = ("declaration", ("kind", "children"), "Declaration of any kind")
    SECTION = ("section", ("title", "children"), "Titled section")
    FUNCTION = ("function", ("signature", "children"), "Function declaration")
    METHOD = ("method", ("signature", "children"), "Method declaration")
    CLASSMETHOD = ("classmethod", ("signature", "children"), "Class method declaration")
    CLASS = ("class", ("signature", "children"), "Class declaration")
    CODE = ("code", ("language", "block"), "Code block")
    EXAMPLE = (
        "example",
        ("language", "block", "line-numbers", "emphasise-lines", "caption"),
        "Code example",
    )
    LIST = ("list", ("items",), "Bulleted list")
    ORDERED_LIST = ("ordered-list", ("items",), "Numbered list")

    # Declaration metadata
    PRIVATE = ("private", (), "Marks a declaration private")
    PUBLIC = ("public", (), "Marks a declaration public")
    NAME = ("name", ("block",), "Declaration name")
    TYPE = ("type", ("block",), "Declaration type")
    PORTABILITY = ("portability", ("block",), "Portability notes")
    SYNOPSIS = ("synopsis", ("block",), "One-line synopsis")
    PLATFORM = ("platform", ("block",), "Supported platforms")
    RETURNS = ("returns", ("block",), "Return value")
    SIGNATURE = ("signature", ("block",), "Signature override")
    STABILITY = ("stability", ("block",), "API stability level")
    THROWS = ("throws", ("name", "block"), "Raised error")

    # Text blocks and links
    LITERAL = ("literal", ("block",), "Literal text")
    LINK = ("link", ("text", "url"), "Hyperlink")
    REF = ("ref", ("id", "block"), "Link reference")
    NOTE = ("note", ("block",), "Note admonition")
    WARNING = ("warning", ("block",), "Warning admonition")
    VERSION_ADDED = ("version-added", ("version", "block"), "Added in version")
    VERSION_CHANGED = ("version-changed", ("version", "block"), "Changed in version")
    DEPRECATED = ("deprecated", ("version", "block"), "Deprecated since version")


_BINARY_OPERATORS: Final[dict[TagKind, Callable[[Any, Any], Any]]] = {
    TagKind.ADD: operator.add,
    TagKind.SUBTRACT: operator.add,
    TagKind.MULTIPLY: operator.mul,
    TagKind.DIVIDE: operator.truediv,
    TagKind.LESS: operator.lt,
    TagKind.LESS_EQUAL: operator.le,
    TagKind.GREATER: operator.gt,
    TagKind.GREATER_EQUAL: operator.ge,
}

_VERSION_KINDS: Final[dict[TagKind, str]] = {
    TagKind.VERSION_ADDED: "added",
    TagKind.VERSION_CHANGED: "changed",
    TagKind.DEPRECATED: "deprecated",
}


def _unhandled(kind: NoReturn) -> NoReturn:
    raise AssertionError(f"Unhandled tag kind: {kind!r}")


def _binary(kind: TagKind, args: Arguments) -> Value:
    left: int | float = args.number("left")
    right: int | float = args.number("right")
    if kind is TagKind.DIVIDE and right == 0:
        raise args.violation("division by zero", "right")
    return _BINARY_OPERATORS[kind](left, right)


def _nth(args: Arguments) -> Value:
    items: tuple[Value, ...] = args.sequence("value")
    index: int | float = args.number("index")
    if isinstance(index, float) and not index.is_integer():
        raise RangeViolation(args.tag, f"index {index} is not an integer", field="index")
    position: int = int(index)
    if not 0 <= position <= len(items) - 1:
        raise RangeViolation(
            args.tag,
            f"index {position} out of range for a sequence of length {len(items)}",
            field="index",
        )
    return items[position]


def _stability(args: Arguments) -> Meta:
    level: str = args.string("block").lower()
    if level not in STABILITY_LEVELS:
        raise args.violation(
            f"unknown stability {level!r} (expected one of: {', '.join(sorted(STABILITY_LEVELS))})",
            "block",
        )
    return Meta("stability", level)


def evaluate(kind: TagKind, args: Arguments) -> Value:
    """Run the handler for ``kind`` over its bound arguments.

    Args:
        kind (TagKind): The tag being evaluated.
        args (Arguments): Arguments bound by parameter name.

    Returns:
        Value: A document node, a `Meta` marker or a primitive value.

    Raises:
        ContractViolation: If the arguments violate the tag's contract.
    """
    logger.trace("Evaluating @%s with %r", kind.value, args)
    match kind:
        case TagKind.TAG:
            return Tag(args.value("tag"), args.value("value"))
        case TagKind.META:
            return Meta(args.value("key"), args.value("value"))

        case TagKind.NOT:
            value: Value = args.value("value")
            return value is False or (is_sequence(value) and len(value) == 0)
        case TagKind.IS_BOOLEAN:
            return is_boolean(args.value("value"))
        case (
            TagKind.ADD
            | TagKind.SUBTRACT
            | TagKind.MULTIPLY
            | TagKind.DIVIDE
            | TagKind.LESS
            | TagKind.LESS_EQUAL
            | TagKind.GREATER
            | TagKind.GREATER_EQUAL
        ):
            return _binary(kind, args)
        case TagKind.EQUAL:
            return structurally_equal(args.value("left"), args.value("right"))

        case TagKind.SYMBOL_NAME:
            return args.node("value").label
        case TagKind.FIRST:
            items: tuple[Value, ...] = args.sequence("value")
            return items[0] if items else ()
        case TagKind.LAST:
            items = args.sequence("value")
            return items[-1] if items else ()
        case TagKind.NTH:
            return _nth(args)

        case TagKind.RAW:
            return Raw(args.string("format"), args.string("block"))
        case TagKind.PARAGRAPH:
            return Paragraph(args.value("value"))
        case TagKind.TEXT:
            return Text(args.value("value"))
        case TagKind.BOLD:
            return Bold(args.value("value"))
        case TagKind.ITALIC:
            return Italic(args.value("value"))
        case TagKind.SOFT_BREAK:
            return SoftBreak(args.value("value"))
        case TagKind.LINE:
            return Line(args.value("value"))

        case TagKind.DECLARATION:
            return Declaration(args.string("kind"), args.sequence("children"))
        case TagKind.SECTION:
            return Section(args.string("title"), args.sequence("children"))
        case TagKind.FUNCTION | TagKind.METHOD | TagKind.CLASSMETHOD:
            return Declaration(
                kind.value,
                args.sequence("children"),
                meta=parse_function_signature(args.string("signature")),
            )
        case TagKind.CLASS:
            return Declaration(
                kind.value,
                args.sequence("children"),
                meta=parse_class_signature(args.string("signature")),
            )
        case TagKind.CODE:
            return CodeBlock(args.string("language"), args.string("block"))
        case TagKind.EXAMPLE:
            return Example(
                language=args.string("language"),
                code=args.string("block"),
                line_numbers=args.boolean("line-numbers", True),
                emphasise_lines=args.value("emphasise-lines", None),
                caption=args.string("caption", "Example"),
            )
        case TagKind.LIST:
            return UnorderedList(args.sequence("items"))
        case TagKind.ORDERED_LIST:
            return OrderedList(args.sequence("items"))

        case TagKind.PRIVATE | TagKind.PUBLIC:
            return Meta(kind.value, True)
        case (
            TagKind.NAME
            | TagKind.TYPE
            | TagKind.PORTABILITY
            | TagKind.SYNOPSIS
            | TagKind.PLATFORM
            | TagKind.RETURNS
            | TagKind.SIGNATURE
        ):
            return Meta(kind.value, args.string("block"))
        case TagKind.STABILITY:
            return _stability(args)
        case TagKind.THROWS:
            return Meta(
                "throws",
                {"description": args.string("block"), "name": args.value("name")},
            )

        case TagKind.LITERAL:
            return Literal(args.string("block"))
        case TagKind.LINK:
            return Link(url=args.value("url"), text=args.value("text"))
        case TagKind.REF:
            return Ref(id=args.string("id"), url=args.string("block"))
        case TagKind.NOTE | TagKind.WARNING:
            return Note(kind=kind.value, text=args.string("block"))
        case TagKind.VERSION_ADDED | TagKind.VERSION_CHANGED | TagKind.DEPRECATED:
            return VersionNote(
                kind=_VERSION_KINDS[kind],
                version=args.string("version"),
                text=args.string("block", ""),
            )

        case _:
            _unhandled(kind)
