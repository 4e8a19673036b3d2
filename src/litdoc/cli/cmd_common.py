# topmark:header:start
#
#   project      : LitDoc
#   file         : cmd_common.py
#   file_relpath : src/litdoc/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by LitDoc CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from litdoc.cli.errors import LitdocConfigError
from litdoc.config.loaders import load_config
from litdoc.config.logging import get_logger
from litdoc.config.model import apply_config
from litdoc.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import ParamSpec, TypeVar

    from litdoc.cli.console import ClickConsole
    from litdoc.config.logging import LitdocLogger
    from litdoc.config.model import Config

    P = ParamSpec("P")
    R = TypeVar("R")

logger: LitdocLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context by the ``litdoc`` group."""
    return ctx.find_root().obj["console"]


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option to a command."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file (defaults to litdoc.toml or [tool.litdoc] in pyproject.toml).",
    )(f)


def load_and_apply_config(config_path: Path | None) -> Config:
    """Load configuration and register its converters.

    Raises:
        LitdocConfigError: If the configuration cannot be read or is invalid.
    """
    try:
        config: Config = load_config(config_path)
    except ConfigError as exc:
        raise LitdocConfigError(str(exc)) from exc
    apply_config(config)
    logger.info(
        "Loaded %d converter(s) from %s", len(config.converters), config.source or "<defaults>"
    )
    return config
