"""Textual run summary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simple_http_tester.run_execution.run_contracts import RunRecord

SUMMARY_SEPARATOR = "-" * 80


@dataclass(frozen=True)
class RunSummary:
    """Counters of a batch run."""

    total: int
    succeeded: int
    duration_ms: int

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def succeeded_percent(self) -> float:
        return _percent(self.succeeded, self.total)

    @property
    def failed_percent(self) -> float:
        return _percent(self.failed, self.total)


def summarize_runs(records: Sequence[RunRecord], duration_ms: int) -> RunSummary:
    succeeded = sum(1 for record in records if record.outcome.success)
    return RunSummary(total=len(records), succeeded=succeeded, duration_ms=duration_ms)


def render_run_summary(records: Sequence[RunRecord], duration_ms: int) -> str:
    """Render the test mode summary printed at the end of a batch."""
    summary = summarize_runs(records, duration_ms)
    return (
        f"{SUMMARY_SEPARATOR}\n"
        f"Executed files:  {summary.total}\n"
        f"Succeeded files: {summary.succeeded} ({summary.succeeded_percent:.1f}%)\n"
        f"Failed files:    {summary.failed} ({summary.failed_percent:.1f}%)\n"
        f"Duration:        {summary.duration_ms} ms\n"
    )


def _percent(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100.0 * count / total
