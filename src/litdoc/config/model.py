# topmark:header:start
#
#   project      : LitDoc
#   file         : model.py
#   file_relpath : src/litdoc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable LitDoc configuration.

`Config` holds the converters declared in configuration. It is built from a
parsed TOML table with `Config.from_toml_dict` and applied to the converter
registry with `apply_config`.

Example:
    ```toml
    [converters.lua]
    pattern = '^\\s*--\\s?(.*)$'
    language = "lua"
    extensions = [".lua"]
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from litdoc.config.guards import get_table_value, is_str_list, is_toml_table
from litdoc.config.keys import Toml
from litdoc.config.logging import get_logger
from litdoc.convert.converters import Converter
from litdoc.convert.registry import register_converter
from litdoc.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from litdoc.config.guards import TomlTable
    from litdoc.config.logging import LitdocLogger

logger: LitdocLogger = get_logger(__name__)


def _required_str(name: str, table: TomlTable, key: str) -> str:
    value: Any = table.get(key)
    if value is None:
        raise ConfigError(f"[{Toml.SECTION_CONVERTERS}.{name}] is missing '{key}'")
    if not isinstance(value, str):
        raise ConfigError(
            f"[{Toml.SECTION_CONVERTERS}.{name}] '{key}' must be a string, "
            f"got {type(value).__name__}"
        )
    return value


def _converter_from_table(name: str, table: TomlTable) -> Converter:
    pattern: str = _required_str(name, table, Toml.KEY_PATTERN)
    language: str = _required_str(name, table, Toml.KEY_LANGUAGE)

    extensions: Any = table.get(Toml.KEY_EXTENSIONS, [])
    if not is_str_list(extensions):
        raise ConfigError(
            f"[{Toml.SECTION_CONVERTERS}.{name}] '{Toml.KEY_EXTENSIONS}' must be a list of strings"
        )
    description: Any = table.get(Toml.KEY_DESCRIPTION, "")
    if not isinstance(description, str):
        raise ConfigError(
            f"[{Toml.SECTION_CONVERTERS}.{name}] '{Toml.KEY_DESCRIPTION}' must be a string"
        )

    try:
        return Converter.from_strings(
            name=name,
            pattern=pattern,
            language=language,
            extensions=extensions,
            description=description,
        )
    except ValueError as exc:
        raise ConfigError(f"[{Toml.SECTION_CONVERTERS}.{name}] {exc}") from exc


@dataclass(frozen=True)
class Config:
    """LitDoc configuration.

    Attributes:
        converters (tuple[Converter, ...]): Converters declared in configuration.
        source (Path | None): The file the configuration was read from, if any.
    """

    converters: tuple[Converter, ...] = ()
    source: Path | None = None

    @classmethod
    def from_toml_dict(cls, data: TomlTable, source: Path | None = None) -> Config:
        """Build a configuration from a parsed TOML table.

        Raises:
            ConfigError: If a converter table is malformed.
        """
        converters: list[Converter] = []
        section: TomlTable = get_table_value(data, Toml.SECTION_CONVERTERS)
        for name, table in section.items():
            if not is_toml_table(table):
                raise ConfigError(f"[{Toml.SECTION_CONVERTERS}.{name}] must be a table")
            converters.append(_converter_from_table(name, table))
        logger.debug(
            "Configuration from %s: %d converter(s)", source or "<defaults>", len(converters)
        )
        return cls(converters=tuple(converters), source=source)


def apply_config(config: Config) -> None:
    """Register the configured converters, replacing same-named ones."""
    for converter in config.converters:
        register_converter(converter, replace=True)
