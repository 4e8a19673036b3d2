# topmark:header:start
#
#   project      : LitDoc
#   file         : tags.py
#   file_relpath : src/litdoc/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc `tags` command.

Prints the markup tag vocabulary with each tag's positional parameters.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from litdoc.cli.cmd_common import get_console
from litdoc.cli.options import EnumChoiceParam, OutputFormat
from litdoc.evaluate.environment import get_environment

if TYPE_CHECKING:
    from litdoc.cli.console import ClickConsole


@click.command(
    name="tags",
    help="List the markup tags and their parameters.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def tags_command(*, output_format: OutputFormat | None = None) -> None:
    """List the tag vocabulary."""
    console: ClickConsole = get_console(click.get_current_context())
    environment = get_environment()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        payload = [
            {"name": name, "params": list(a.params), "description": a.kind.description}
            for name, a in sorted(environment.items())
        ]
        console.print(json.dumps(payload, indent=2))
        return

    for name, applicative in sorted(environment.items()):
        params: str = ", ".join(applicative.params)
        console.print(f"{console.styled('@' + name, bold=True)}({params})")
