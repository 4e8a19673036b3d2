# topmark:header:start
#
#   project      : LitDoc
#   file         : classify.py
#   file_relpath : src/litdoc/convert/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification and merging for source-to-markup conversion.

Each physical line of a source file is classified as documentation
(`Doc`), source code (`Code`) or a blank line (`Blank`). Adjacent
classifications are then folded left to right with `assimilate`, which
coalesces compatible runs:

* documentation runs always coalesce;
* code runs coalesce when they share the same language;
* a blank line following code is absorbed into the code run.

The merged runs are rendered back into LitDoc markup text by `render`;
`convert` chains the whole pipeline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from litdoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from litdoc.config.logging import LitdocLogger

logger: LitdocLogger = get_logger(__name__)

_RE_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Doc:
    """A run of documentation-comment lines, comment syntax already stripped."""

    line_number: int
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Code:
    """A run of source lines (blank lines inside the run included)."""

    line_number: int
    language: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Blank:
    """A single blank or whitespace-only line, kept verbatim."""

    line_number: int
    text: str


LineClassification = Union[Doc, Code, Blank]


def classify(
    comment_pattern: re.Pattern[str],
    language: str,
    line: str,
    line_number: int,
) -> LineClassification:
    """Classify a single source line.

    Args:
        comment_pattern (re.Pattern[str]): Pattern recognizing a documentation
            comment; its first capture group is the documentation text.
        language (str): Language identifier attached to code lines.
        line (str): The line to classify, without its line terminator.
        line_number (int): Position of the line in its file.

    Returns:
        LineClassification: `Blank` for empty/whitespace-only lines, `Doc` when
        ``comment_pattern`` matches, `Code` otherwise.
    """
    if not line.strip():
        return Blank(line_number, line)
    match = comment_pattern.match(line)
    if match is not None:
        captured: str | None = match.group(1) if comment_pattern.groups else None
        return Doc(line_number, (captured or "",))
    return Code(line_number, language, (line,))


def assimilate(
    a: LineClassification,
    b: LineClassification,
) -> tuple[LineClassification] | tuple[LineClassification, LineClassification]:
    """Merge ``b`` into ``a`` when their kinds are compatible.

    The first line number of ``a`` is kept on merged results.

    Returns:
        tuple[LineClassification] | tuple[LineClassification, LineClassification]:
        A single merged classification, or ``(a, b)`` when they stay apart.
    """
    match a, b:
        case Doc(), Doc():
            return (Doc(a.line_number, a.lines + b.lines),)
        case Code(), Code() if a.language == b.language:
            return (Code(a.line_number, a.language, a.lines + b.lines),)
        case Code(), Blank():
            return (Code(a.line_number, a.language, (*a.lines, b.text)),)
        case _:
            return (a, b)


def merge(classifications: Iterable[LineClassification]) -> list[LineClassification]:
    """Fold classifications left to right with `assimilate`.

    Only the most recently produced element is ever reconsidered: once an
    element has been followed by one it did not absorb, it is final.
    """
    merged: list[LineClassification] = []
    pending: LineClassification | None = None
    for current in classifications:
        if pending is None:
            pending = current
            continue
        *done, pending = assimilate(pending, current)
        merged.extend(done)
    if pending is not None:
        merged.append(pending)
    return merged


def _quote(source: str) -> str:
    return source.replace('"', '\\"')


def render(classification: LineClassification) -> str:
    """Render a classification as LitDoc markup text."""
    match classification:
        case Doc(lines=lines):
            return "\n".join(lines)
        case Blank(text=text):
            return f"{text}\n"
        case Code(language=language, lines=lines):
            source: str = _quote("\n".join(lines))
            return f'@code(language: "{language}" "{source}")\n'


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``\r\n``, ``\r`` or ``\n``.

    A single trailing line terminator closes the last line; it does not open
    an additional empty one.
    """
    lines: list[str] = _RE_LINE_BREAK.split(text)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def convert(comment_pattern: re.Pattern[str], language: str, text: str) -> str:
    """Convert source ``text`` into LitDoc markup.

    Args:
        comment_pattern (re.Pattern[str]): Documentation-comment pattern (see `classify`).
        language (str): Language identifier used for code blocks.
        text (str): The full source text.

    Returns:
        str: The markup text. The newline closing the final block is not emitted.
    """
    classified: list[LineClassification] = [
        classify(comment_pattern, language, line, number)
        for number, line in enumerate(split_lines(text), start=1)
    ]
    for item in classified:
        logger.trace("line %d: %s", item.line_number, type(item).__name__)

    merged: list[LineClassification] = merge(classified)
    logger.debug(
        "Converted %d line(s) into %d block(s) (language=%s)",
        len(classified),
        len(merged),
        language,
    )
    return "\n".join(render(item) for item in merged).removesuffix("\n")
