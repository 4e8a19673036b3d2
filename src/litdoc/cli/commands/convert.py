# topmark:header:start
#
#   project      : LitDoc
#   file         : convert.py
#   file_relpath : src/litdoc/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc `convert` command.

Converts commented source files into LitDoc markup. Directories expand to the
files a registered converter handles; a single ``-`` reads STDIN.

Examples:
  Convert a single file to STDOUT:

    $ litdoc convert src/app.js

  Convert a tree into an output directory, skipping vendored code:

    $ litdoc convert src/ --exclude "vendor/" --output-dir build/docs

  Convert STDIN:

    $ cat tool.py | litdoc convert - --language pound
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from litdoc.cli.cmd_common import config_option, get_console, load_and_apply_config
from litdoc.cli.errors import (
    LitdocEncodingError,
    LitdocFileNotFoundError,
    LitdocIOError,
    LitdocUnsupportedFileTypeError,
    LitdocUsageError,
)
from litdoc.cli.options import get_effective_verbosity
from litdoc.config.logging import get_logger
from litdoc.constants import MARKUP_SUFFIX
from litdoc.convert.registry import converter_for_path, get_converter
from litdoc.errors import UnknownConverterError
from litdoc.files import resolve_input_files

if TYPE_CHECKING:
    from litdoc.cli.console import ClickConsole
    from litdoc.config.logging import LitdocLogger
    from litdoc.convert.converters import Converter

logger: LitdocLogger = get_logger(__name__)

STDIN_MARKER = "-"


def _resolve_forced_converter(name: str | None) -> Converter | None:
    if name is None:
        return None
    try:
        return get_converter(name)
    except UnknownConverterError as exc:
        raise LitdocUsageError(f"{exc}. Run 'litdoc languages' to list converters.") from exc


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LitdocEncodingError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise LitdocIOError(f"{path}: {exc.strerror or exc}") from exc


def _output_target(output_dir: Path, path: Path, base: Path) -> Path:
    """Return the markup file for ``path``, mirroring its location below ``base``.

    Files outside ``base`` land directly in ``output_dir``.
    """
    try:
        rel: Path = path.resolve().relative_to(base.resolve())
    except ValueError:
        rel = Path(path.name)
    return output_dir / rel.parent / f"{rel.name}{MARKUP_SUFFIX}"


def _plan_outputs(files: list[Path], output_dir: Path) -> dict[Path, Path]:
    """Map each input file to its output file.

    Raises:
        LitdocUsageError: If two inputs would be written to the same output file.
    """
    base: Path = Path.cwd()
    plan: dict[Path, Path] = {}
    claimed: dict[Path, Path] = {}
    for path in files:
        target: Path = _output_target(output_dir, path, base)
        previous: Path | None = claimed.get(target)
        if previous is not None:
            raise LitdocUsageError(f"{previous} and {path} would both be written to {target}.")
        claimed[target] = path
        plan[path] = target
    return plan


def _write_markup(target: Path, markup: str) -> None:
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(markup + "\n", encoding="utf-8")
    except OSError as exc:
        raise LitdocIOError(f"{target}: {exc.strerror or exc}") from exc


@click.command(
    name="convert",
    help="Convert commented source files into LitDoc markup.",
    epilog="""
Comment lines become documentation, other lines become code blocks, and blank
lines are kept. Use '-' to read from STDIN (requires --language).
""",
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--language",
    "-l",
    "converter_name",
    default=None,
    help="Converter to use for every input (see 'litdoc languages').",
)
@click.option(
    "--exclude",
    "-e",
    "exclude_patterns",
    multiple=True,
    help="Gitignore-style pattern of files to skip. May be repeated.",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write '<path>.ldoc' files here, mirroring the input tree, instead of printing to STDOUT.",
)
@config_option
def convert_command(
    *,
    paths: tuple[str, ...],
    converter_name: str | None,
    exclude_patterns: tuple[str, ...],
    output_dir: Path | None,
    config_path: Path | None,
) -> None:
    """Convert source files (or STDIN) into LitDoc markup.

    Args:
        paths (tuple[str, ...]): Files, directories or ``-`` for STDIN.
        converter_name (str | None): Converter forced for every input.
        exclude_patterns (tuple[str, ...]): Gitignore-style exclude patterns.
        output_dir (Path | None): Output directory; STDOUT when None.
        config_path (Path | None): Explicit configuration file.

    Raises:
        LitdocUsageError: If no input is given, STDIN is mixed with paths,
            STDIN is used without ``--language``, the converter is unknown, or
            two inputs map to the same output file.
        LitdocFileNotFoundError: If an input path does not exist.
        LitdocUnsupportedFileTypeError: If no converter handles an input file.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    load_and_apply_config(config_path)
    forced: Converter | None = _resolve_forced_converter(converter_name)

    if not paths:
        raise LitdocUsageError("No input given. Pass files, directories or '-' for STDIN.")

    if STDIN_MARKER in paths:
        if len(paths) > 1:
            raise LitdocUsageError("'-' (STDIN) cannot be combined with other paths.")
        if forced is None:
            raise LitdocUsageError("Reading STDIN requires --language.")
        text: str = click.get_text_stream("stdin").read()
        logger.info("Converting STDIN with %s", forced.name)
        console.print(forced.convert(text))
        return

    missing: list[str] = [p for p in paths if not Path(p).exists()]
    if missing:
        raise LitdocFileNotFoundError(f"No such file or directory: {', '.join(missing)}")

    files: list[Path] = resolve_input_files(paths, exclude_patterns=exclude_patterns)
    if not files:
        if vlevel >= 0:
            console.warn("No files to convert.")
        return

    targets: dict[Path, Path] = {} if output_dir is None else _plan_outputs(files, output_dir)

    for index, path in enumerate(files):
        converter: Converter | None = forced or converter_for_path(path)
        if converter is None:
            raise LitdocUnsupportedFileTypeError(
                f"{path}: no converter for '{path.suffix or path.name}'. Use --language."
            )
        logger.debug("Converting %s with %s", path, converter.name)
        markup: str = converter.convert(_read_source(path))

        if output_dir is None:
            if index:
                console.print()
            console.print(markup)
            continue

        target: Path = targets[path]
        _write_markup(target, markup)
        if vlevel > 0:
            console.print(f"{path} -> {target}")

    logger.info("Converted %d file(s)", len(files))
