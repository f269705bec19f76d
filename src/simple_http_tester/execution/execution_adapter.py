"""Execution adapter wrapping the external engine for one source."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .engine_contracts import Engine, ExecutionOptions, ExecutionOutcome, Value
from .progress import NullProgressObserver, ProgressObserver
from .variable_environment import build_variable_environment

_LOGGER = logging.getLogger("simple_http_tester.execution")


@dataclass(frozen=True)
class RunPosition:
    """One-based position of a source within the batch."""

    index: int
    total: int


def execute_source(
    engine: Engine,
    content: str,
    options: ExecutionOptions,
    variables: Mapping[str, Value],
    *,
    position: RunPosition,
    observer: ProgressObserver | None = None,
) -> ExecutionOutcome:
    """Run one source content through the engine.

    Raises:
      ParseFailure: If the engine rejects the content.
    """
    resolved_observer = observer or NullProgressObserver()
    _notify(resolved_observer.on_run_starting, position.index, position.total, options.filename)
    outcome = engine(content, options, build_variable_environment(variables))
    _notify(resolved_observer.on_run_completed, outcome, options.filename)
    return outcome


def _notify(callback, *args) -> None:
    try:
        callback(*args)
    except Exception:  # pylint: disable=broad-exception-caught
        _LOGGER.warning("Progress notification failed", exc_info=True)
