# topmark:header:start
#
#   project      : LitDoc
#   file         : version.py
#   file_relpath : src/litdoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc `version` command.

Prints the current LitDoc version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from litdoc.cli.cmd_common import get_console
from litdoc.cli.options import EnumChoiceParam, OutputFormat, get_effective_verbosity
from litdoc.constants import LITDOC_VERSION

if TYPE_CHECKING:
    from litdoc.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of LitDoc.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LitDoc.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": LITDOC_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("LitDoc version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(LITDOC_VERSION, bold=True)}")
    else:
        console.print(console.styled(LITDOC_VERSION, bold=True))
