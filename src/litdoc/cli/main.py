# topmark:header:start
#
#   project      : LitDoc
#   file         : main.py
#   file_relpath : src/litdoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LitDoc command-line entry point.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console and verbosity from there. Internal logging is
configured from the ``LITDOC_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import click

from litdoc.cli.commands.convert import convert_command
from litdoc.cli.commands.languages import languages_command
from litdoc.cli.commands.tags import tags_command
from litdoc.cli.commands.version import version_command
from litdoc.cli.console import ClickConsole
from litdoc.cli.options import common_verbose_options, resolve_verbosity
from litdoc.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    if no_color:
        ctx.color = False
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LitDoc: literate documentation from commented source files.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable ANSI colors in output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the LitDoc CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'litdoc convert [PATHS...]' to convert source files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(languages_command)

cli.add_command(tags_command)

cli.add_command(version_command)
