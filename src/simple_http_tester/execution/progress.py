"""Progress observers notified around each source execution."""

from __future__ import annotations

from typing import Protocol

import click

from .engine_contracts import ExecutionOutcome

_PROGRESS_BAR_WIDTH = 25


class ProgressObserver(Protocol):
    """Receives fire-and-forget notifications from the run loop."""

    def on_run_starting(self, index: int, total: int, source: str) -> None: ...

    def on_run_completed(self, outcome: ExecutionOutcome, source: str) -> None: ...


class NullProgressObserver:
    """Observer ignoring every notification."""

    def on_run_starting(self, index: int, total: int, source: str) -> None:
        return None

    def on_run_completed(self, outcome: ExecutionOutcome, source: str) -> None:
        return None


class ConsoleProgressReporter:
    """Test mode progress lines written to stderr."""

    def __init__(self, *, color: bool, progress_bar: bool = False) -> None:
        self._color = color
        self._progress_bar = progress_bar

    def on_run_starting(self, index: int, total: int, source: str) -> None:
        if self._progress_bar:
            self._echo(_render_progress_bar(index, total, source), nl=False)
            return
        label = click.style(source, bold=True)
        self._echo(f"{label}: {click.style('Running', fg='cyan', bold=True)} [{index}/{total}]")

    def on_run_completed(self, outcome: ExecutionOutcome, source: str) -> None:
        if self._progress_bar:
            click.echo("\r\x1b[2K", err=True, nl=False, color=True)
        status = (
            click.style("Success", fg="green", bold=True)
            if outcome.success
            else click.style("Failure", fg="red", bold=True)
        )
        label = click.style(source, bold=True)
        count = len(outcome.steps)
        self._echo(f"{label}: {status} ({count} request(s) in {outcome.time_in_ms} ms)")

    def _echo(self, message: str, *, nl: bool = True) -> None:
        click.echo(message, err=True, nl=nl, color=self._color)


def _render_progress_bar(index: int, total: int, source: str) -> str:
    completed = (index - 1) * _PROGRESS_BAR_WIDTH // total if total else 0
    bar = "=" * completed + ">" + " " * (_PROGRESS_BAR_WIDTH - completed - 1)
    return f"\r[{bar}] {index}/{total} {source}"
