# topmark:header:start
#
#   project      : LitDoc
#   file         : languages.py
#   file_relpath : src/litdoc/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc `languages` command.

Lists the registered converters: the built-in presets plus any declared in
configuration. Use the names with ``litdoc convert --language``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from litdoc.cli.cmd_common import config_option, get_console, load_and_apply_config
from litdoc.cli.options import EnumChoiceParam, OutputFormat, get_effective_verbosity
from litdoc.convert.registry import get_converter_registry

if TYPE_CHECKING:
    from pathlib import Path

    from litdoc.cli.console import ClickConsole
    from litdoc.convert.converters import Converter


def _serialize(converter: Converter) -> dict[str, Any]:
    return {
        "name": converter.name,
        "language": converter.language,
        "pattern": converter.pattern.pattern,
        "extensions": list(converter.extensions),
        "description": converter.description,
    }


@click.command(
    name="languages",
    help="List the registered source converters.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@config_option
def languages_command(
    *,
    output_format: OutputFormat | None = None,
    config_path: Path | None = None,
) -> None:
    """List registered converters.

    Args:
        output_format (OutputFormat | None): Output format; human-readable when None.
        config_path (Path | None): Explicit configuration file.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    load_and_apply_config(config_path)
    converters: list[Converter] = [c for _k, c in sorted(get_converter_registry().items())]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([_serialize(c) for c in converters], indent=2))
        return

    if vlevel > 0:
        console.print(console.styled("Registered converters:\n", bold=True, underline=True))
    width: int = max((len(c.name) for c in converters), default=0)
    for c in converters:
        exts: str = ", ".join(c.extensions)
        console.print(
            f"{console.styled(c.name.ljust(width), bold=True)}  {c.language:<10} {exts}"
        )
        if vlevel > 0:
            console.print(f"{'':{width}}  pattern: {c.pattern.pattern}")
            if c.description:
                console.print(f"{'':{width}}  {c.description}")
