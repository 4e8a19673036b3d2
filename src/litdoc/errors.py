# topmark:header:start
#
#   project      : LitDoc
#   file         : errors.py
#   file_relpath : src/litdoc/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the LitDoc core.

Usage:
    Tag handlers raise `ContractViolation` (or `RangeViolation`) when bound
    arguments do not satisfy the tag's contract. Violations are fatal to the
    invocation and propagate to the caller; the core never retries or
    suppresses them.

    The configuration layer raises `ConfigError`, and converter lookups raise
    `UnknownConverterError`. The CLI maps these onto `click.ClickException`
    subclasses (see `litdoc.cli.errors`).
"""

from __future__ import annotations


class LitdocError(Exception):
    """Base class for all LitDoc core errors."""


class ContractViolation(LitdocError, ValueError):
    """A tag handler received arguments that violate its contract.

    Attributes:
        tag (str): Name of the tag whose contract was violated.
        field (str | None): Name of the offending parameter, if any.
    """

    def __init__(self, tag: str, message: str, *, field: str | None = None) -> None:
        self.tag: str = tag
        self.field: str | None = field
        where: str = f"@{tag}" if field is None else f"@{tag}({field})"
        super().__init__(f"{where}: {message}")


class RangeViolation(ContractViolation, IndexError):
    """An index argument is outside the bounds of its sequence."""


class ConfigError(LitdocError):
    """Malformed or invalid LitDoc configuration."""


class UnknownConverterError(LitdocError, KeyError):
    """No converter is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown converter: {self.name}"
