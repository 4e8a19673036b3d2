# topmark:header:start
#
#   project      : LitDoc
#   file         : converters.py
#   file_relpath : src/litdoc/convert/converters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source-to-markup converters for line-comment languages.

A `Converter` pairs a documentation-comment pattern with the language
identifier attached to code blocks. Two presets ship with LitDoc:

* `SLASH_CONVERTER` for ``//`` line comments (JavaScript), and
* `POUND_CONVERTER` for ``#`` line comments (Python).

Further languages only need a new pattern and language identifier, either
registered in code (see `litdoc.convert.registry`) or declared in
configuration (see `litdoc.config.loaders`).
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from litdoc.config.logging import get_logger
from litdoc.convert.classify import convert

if TYPE_CHECKING:
    from pathlib import Path

    from litdoc.config.logging import LitdocLogger

logger: LitdocLogger = get_logger(__name__)


@dataclass(frozen=True)
class Converter:
    """A named line-comment converter.

    Attributes:
        name (str): Registry identifier (e.g. ``"slash"``).
        pattern (re.Pattern[str]): Documentation-comment pattern; the first capture
            group is the documentation text.
        language (str): Language identifier emitted on ``@code`` blocks.
        extensions (tuple[str, ...]): Filename extensions (with leading dot) handled
            by this converter.
        description (str): Human-readable description.
    """

    name: str
    pattern: re.Pattern[str]
    language: str
    extensions: tuple[str, ...] = ()
    description: str = ""

    @classmethod
    def from_strings(
        cls,
        name: str,
        pattern: str,
        language: str,
        extensions: Iterable[str] = (),
        description: str = "",
    ) -> Converter:
        """Build a converter from a pattern source string.

        Raises:
            ValueError: If ``pattern`` does not compile or has no capture group.
        """
        try:
            compiled: re.Pattern[str] = re.compile(pattern)
        except re.error as exc:
            raise ValueError(f"Invalid comment pattern {pattern!r}: {exc}") from exc
        if compiled.groups < 1:
            raise ValueError(f"Comment pattern {pattern!r} has no capture group")
        return cls(
            name=name,
            pattern=compiled,
            language=language,
            extensions=tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions),
            description=description,
        )

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` has one of this converter's extensions."""
        suffix: str = path.suffix.lower()
        return any(suffix == ext.lower() for ext in self.extensions)

    def convert(self, text: str) -> str:
        """Convert source ``text`` into LitDoc markup."""
        logger.debug("Converting %d character(s) with '%s'", len(text), self.name)
        return convert(self.pattern, self.language, text)


SLASH_CONVERTER: Converter = Converter.from_strings(
    name="slash",
    pattern=r"^\s*//\s?(.*)$",
    language="js",
    extensions=(".js", ".mjs", ".cjs"),
    description="Line comments introduced by '//'",
)

POUND_CONVERTER: Converter = Converter.from_strings(
    name="pound",
    pattern=r"^\s*#\s?(.*)$",
    language="python",
    extensions=(".py",),
    description="Line comments introduced by '#'",
)

BUILTIN_CONVERTERS: tuple[Converter, ...] = (SLASH_CONVERTER, POUND_CONVERTER)


def convert_slash(text: str) -> str:
    """Convert ``//``-commented source text into LitDoc markup."""
    return SLASH_CONVERTER.convert(text)


def convert_pound(text: str) -> str:
    """Convert ``#``-commented source text into LitDoc markup."""
    return POUND_CONVERTER.convert(text)
