"""Process environment signals."""

from __future__ import annotations

from collections.abc import Mapping

CI_ENVIRONMENT_VARIABLES = ("CI", "TF_BUILD")


def is_ci(environ: Mapping[str, str]) -> bool:
    """Whether the process runs under continuous integration."""
    return any(name in environ for name in CI_ENVIRONMENT_VARIABLES)


def resolve_color(
    requested: bool | None, *, stdout_is_terminal: bool, environ: Mapping[str, str]
) -> bool:
    """Decide whether output is colored; an explicit request always wins."""
    if requested is not None:
        return requested
    if "NO_COLOR" in environ:
        return False
    return stdout_is_terminal


def use_progress_bar(
    *, test_mode: bool, verbose: bool, stderr_is_terminal: bool, environ: Mapping[str, str]
) -> bool:
    return test_mode and not verbose and stderr_is_terminal and not is_ci(environ)
