# topmark:header:start
#
#   project      : LitDoc
#   file         : registry.py
#   file_relpath : src/litdoc/convert/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of source-to-markup converters.

The registry is seeded with the built-in presets and can be extended at
runtime, either directly with `register_converter` or from configuration
(see `litdoc.config.model.apply_config`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from litdoc.config.logging import get_logger
from litdoc.convert.converters import BUILTIN_CONVERTERS
from litdoc.errors import UnknownConverterError

if TYPE_CHECKING:
    from pathlib import Path

    from litdoc.config.logging import LitdocLogger
    from litdoc.convert.converters import Converter

logger: LitdocLogger = get_logger(__name__)


_registry: dict[str, Converter] = {c.name: c for c in BUILTIN_CONVERTERS}


def register_converter(converter: Converter, *, replace: bool = False) -> Converter:
    """Register ``converter`` under its name.

    Args:
        converter (Converter): The converter to register.
        replace (bool): Allow replacing an existing converter of the same name.

    Returns:
        Converter: The registered converter.

    Raises:
        ValueError: If a converter with the same name is already registered
            and ``replace`` is False.
    """
    if converter.name in _registry and not replace:
        raise ValueError(f"Converter '{converter.name}' is already registered.")
    logger.debug(
        "Registering converter '%s' (language=%s, extensions=%s)",
        converter.name,
        converter.language,
        ", ".join(converter.extensions) or "-",
    )
    _registry[converter.name] = converter
    return converter


def unregister_converter(name: str) -> None:
    """Remove the converter registered under ``name``.

    Raises:
        UnknownConverterError: If no converter is registered under ``name``.
    """
    if name not in _registry:
        raise UnknownConverterError(name)
    del _registry[name]


def reset_converter_registry() -> None:
    """Restore the registry to the built-in presets."""
    _registry.clear()
    _registry.update({c.name: c for c in BUILTIN_CONVERTERS})


def get_converter_registry() -> dict[str, Converter]:
    """Return a snapshot of the registry (converter name to converter)."""
    return dict(_registry)


def get_converter(name: str) -> Converter:
    """Return the converter registered under ``name``.

    Raises:
        UnknownConverterError: If no converter is registered under ``name``.
    """
    try:
        return _registry[name]
    except KeyError:
        raise UnknownConverterError(name) from None


def converter_for_path(path: Path) -> Converter | None:
    """Resolve the converter handling ``path`` by extension.

    When several converters claim the extension, the most recently
    registered one wins and a warning is logged.

    Returns:
        Converter | None: The matching converter, or None.
    """
    matches: list[Converter] = [c for c in _registry.values() if c.matches(path)]
    if not matches:
        logger.debug("No converter registered for '%s'", path)
        return None
    if len(matches) > 1:
        logger.warning(
            "Ambiguous converter match for: %s (%s)",
            path,
            ", ".join(c.name for c in matches),
        )
    return matches[-1]
