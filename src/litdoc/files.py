# topmark:header:start
#
#   project      : LitDoc
#   file         : files.py
#   file_relpath : src/litdoc/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for conversion.

Positional paths are expanded (directories recursively), filtered to the
files some registered converter handles, and pruned with gitignore-style
exclude patterns. The result is a deterministic, sorted list of files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from litdoc.config.logging import get_logger
from litdoc.convert.registry import converter_for_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from litdoc.config.logging import LitdocLogger


logger: LitdocLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_input_files(
    paths: Iterable[str | Path],
    *,
    exclude_patterns: Iterable[str] = (),
    base: Path | None = None,
) -> list[Path]:
    """Return the files to convert.

    Semantics:
      1. **Literal files** are always kept; choosing a converter for them is the
         caller's business (``--language`` may force one).
      2. **Directories** expand recursively to the files a registered converter
         handles (by extension).
      3. **Exclude subtraction**: files matching any exclude pattern, relative
         to ``base``, are dropped.

    Args:
        paths (Iterable[str | Path]): Files and directories given by the user.
        exclude_patterns (Iterable[str]): Gitignore-style patterns to exclude.
        base (Path | None): Directory exclude patterns are relative to
            (defaults to the working directory).

    Returns:
        list[Path]: Sorted list of files selected for conversion.
    """
    workspace_root: Path = base or Path.cwd()
    candidates: set[Path] = set()

    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            found: list[Path] = [
                f for f in p.rglob("*") if f.is_file() and converter_for_path(f) is not None
            ]
            logger.debug("Expanded directory %s to %d file(s)", p, len(found))
            candidates.update(found)
        elif p.is_file():
            candidates.add(p)
        else:
            logger.warning("No such file or directory: %s", p)

    patterns: list[str] = [s for s in (pat.strip() for pat in exclude_patterns) if s]
    if patterns:
        spec: PathSpec = PathSpec.from_lines("gitwildmatch", patterns)
        candidates = {
            p for p in candidates if not spec.match_file(_rel_for_match(p, workspace_root))
        }

    logger.trace("Files to convert: %d -- %s", len(candidates), sorted(candidates))
    return sorted(candidates)
