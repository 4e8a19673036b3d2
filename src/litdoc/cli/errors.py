# topmark:header:start
#
#   project      : LitDoc
#   file         : errors.py
#   file_relpath : src/litdoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for LitDoc CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors (`litdoc.errors`) are translated into
    these at the command boundary.
"""

from __future__ import annotations

import click

from litdoc.cli.exit_codes import ExitCode


class LitdocCliError(click.ClickException):
    """Base class for all LitDoc CLI errors."""

    exit_code = ExitCode.FAILURE


class LitdocUsageError(LitdocCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LitdocConfigError(LitdocCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class LitdocFileNotFoundError(LitdocCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LitdocIOError(LitdocCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class LitdocEncodingError(LitdocCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class LitdocUnsupportedFileTypeError(LitdocCliError):
    """Error when no converter handles an input file."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE
