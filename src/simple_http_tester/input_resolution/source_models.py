"""Input source entities."""

from __future__ import annotations

from dataclasses import dataclass

STDIN_SOURCE = "-"


@dataclass(frozen=True)
class InputResolution:
    """Resolved sources, or a request to show usage when nothing can be read."""

    sources: tuple[str, ...]
    show_help: bool = False
