# topmark:header:start
#
#   project      : LitDoc
#   file         : loaders.py
#   file_relpath : src/litdoc/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is looked up in this order:

1. an explicit path (``litdoc convert --config FILE``);
2. ``litdoc.toml`` in the working directory;
3. the ``[tool.litdoc]`` table of ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from litdoc.config.guards import get_table_value, is_toml_table
from litdoc.config.logging import get_logger
from litdoc.config.model import Config
from litdoc.constants import LITDOC_TOML_NAME, PYPROJECT_SECTION, PYPROJECT_TOML_NAME
from litdoc.errors import ConfigError

if TYPE_CHECKING:
    from litdoc.config.guards import TomlTable
    from litdoc.config.logging import LitdocLogger

logger: LitdocLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``litdoc.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration from {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def _pyproject_section(data: TomlTable) -> TomlTable:
    table: TomlTable = data
    for part in PYPROJECT_SECTION.split("."):
        table = get_table_value(table, part)
    return table


def discover_config_path(cwd: Path | None = None) -> Path | None:
    """Return the configuration file to use from ``cwd``, if any.

    ``pyproject.toml`` only counts when it has a ``[tool.litdoc]`` table.
    """
    base: Path = cwd or Path.cwd()
    candidate: Path = base / LITDOC_TOML_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = base / PYPROJECT_TOML_NAME
    if pyproject.is_file() and _pyproject_section(load_toml_dict(pyproject)):
        return pyproject
    return None


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Load the LitDoc configuration.

    Args:
        path (Path | None): Explicit configuration file; discovered from ``cwd``
            when None.
        cwd (Path | None): Directory used for discovery (defaults to the working
            directory).

    Returns:
        Config: The loaded configuration; empty when no source was found.

    Raises:
        ConfigError: If the configuration cannot be read or is invalid.
    """
    source: Path | None = path or discover_config_path(cwd)
    if source is None:
        logger.debug("No LitDoc configuration found")
        return Config()

    logger.info("Loading configuration from %s", source)
    data: TomlTable = load_toml_dict(source)
    if source.name == PYPROJECT_TOML_NAME:
        data = _pyproject_section(data)
    return Config.from_toml_dict(data, source=source)
