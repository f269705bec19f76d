"""Input source resolution and reading."""

from __future__ import annotations

import glob
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .source_models import STDIN_SOURCE, InputResolution


class SourceAccessError(Exception):
    """Raised when a source does not exist or cannot be read."""


def resolve_input_sources(
    positional_sources: Sequence[str],
    glob_expanded_paths: Sequence[str],
    *,
    stdin_is_interactive: bool,
) -> InputResolution:
    """Concatenate positional sources and glob matches, in caller order.

    Repeated sources are kept so they run several times. With no source at all,
    a non-interactive stdin is read instead; an interactive one asks for help.
    """
    sources = (*positional_sources, *glob_expanded_paths)
    if sources:
        return InputResolution(sources=tuple(sources))
    if stdin_is_interactive:
        return InputResolution(sources=(), show_help=True)
    return InputResolution(sources=(STDIN_SOURCE,))


def expand_glob_patterns(patterns: Sequence[str]) -> list[str]:
    """Expand each pattern into its sorted matches, keeping pattern order."""
    paths: list[str] = []
    for pattern in patterns:
        paths.extend(sorted(glob.glob(pattern, recursive=True)))
    return paths


def read_source_content(source: str, *, stdin: TextIO) -> str:
    """Return the text of a source, checking it exists first."""
    if source == STDIN_SOURCE:
        try:
            return stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceAccessError(f"cannot read standard input: {exc}") from exc
    path = Path(source)
    if not path.exists():
        raise SourceAccessError(f"cannot access '{source}': No such file or directory")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceAccessError(f"cannot read '{source}': {exc}") from exc
