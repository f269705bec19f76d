"""Batch severity classification and exit code resolution."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from simple_http_tester.execution.engine_contracts import ExecutionOutcome


class ExitCode(IntEnum):
    """Process exit statuses."""

    OK = 0
    COMMANDLINE = 1
    PARSING = 2
    RUNTIME = 3
    ASSERT = 4
    UNDEFINED = 127


class BatchSeverity(IntEnum):
    """Worst-case outcome of a run, ordered by report-worthiness."""

    OK = 0
    ASSERT_FAILURE = 1
    RUNNER_FAILURE = 2

    @property
    def exit_code(self) -> ExitCode:
        return _EXIT_CODE_BY_SEVERITY[self]


_EXIT_CODE_BY_SEVERITY = {
    BatchSeverity.OK: ExitCode.OK,
    BatchSeverity.ASSERT_FAILURE: ExitCode.ASSERT,
    BatchSeverity.RUNNER_FAILURE: ExitCode.RUNTIME,
}


def classify_outcome(outcome: ExecutionOutcome) -> BatchSeverity:
    """Classify the errors of a single execution outcome."""
    errors = outcome.errors()
    if not errors:
        return BatchSeverity.OK
    if all(error.assertion for error in errors):
        return BatchSeverity.ASSERT_FAILURE
    return BatchSeverity.RUNNER_FAILURE


def classify_batch(outcomes: Iterable[ExecutionOutcome]) -> BatchSeverity:
    """Return the worst severity across all outcomes of a batch.

    A single runner error anywhere outranks any number of assertion failures,
    so the whole batch is reported as a runner failure.
    """
    return max((classify_outcome(outcome) for outcome in outcomes), default=BatchSeverity.OK)
