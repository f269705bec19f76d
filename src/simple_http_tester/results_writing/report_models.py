"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from simple_http_tester.execution.engine_contracts import RunError
from simple_http_tester.run_execution.run_contracts import RunRecord


class StepStatus(str, Enum):
    """Rendered status of one step in reports."""

    SUCCESS = "success"
    ASSERT_FAILURE = "assert-failure"
    RUNNER_FAILURE = "runner-failure"


@dataclass(frozen=True)
class FailureMessage:
    """One error rendered in a report, tagged by kind."""

    entry_index: int
    kind: str
    message: str
    line: int | None

    def describe(self) -> str:
        location = f"line {self.line}" if self.line is not None else f"entry {self.entry_index}"
        return f"{self.kind} error ({location}): {self.message}"


@dataclass(frozen=True)
class StepReport:
    """Derived per-step outcome."""

    entry_index: int
    status: StepStatus
    time_in_ms: int


@dataclass(frozen=True)
class TestcaseReport:
    """Report view of one run record."""

    __test__ = False

    name: str
    success: bool
    time_in_ms: int
    steps: tuple[StepReport, ...]
    failures: tuple[FailureMessage, ...]

    @property
    def assertion_failures(self) -> tuple[FailureMessage, ...]:
        return tuple(failure for failure in self.failures if failure.kind == "assert")

    @property
    def runner_failures(self) -> tuple[FailureMessage, ...]:
        return tuple(failure for failure in self.failures if failure.kind == "runner")


def build_testcase_report(record: RunRecord) -> TestcaseReport:
    """Derive the report view of a run record."""
    steps = tuple(
        StepReport(
            entry_index=step.entry_index,
            status=_step_status(step.errors),
            time_in_ms=step.time_in_ms,
        )
        for step in record.outcome.steps
    )
    failures = tuple(
        FailureMessage(
            entry_index=step.entry_index,
            kind=error.kind,
            message=error.message,
            line=error.line,
        )
        for step in record.outcome.steps
        for error in step.errors
    )
    return TestcaseReport(
        name=record.source,
        success=record.outcome.success,
        time_in_ms=record.outcome.time_in_ms,
        steps=steps,
        failures=failures,
    )


def _step_status(errors: tuple[RunError, ...]) -> StepStatus:
    if not errors:
        return StepStatus.SUCCESS
    if all(error.assertion for error in errors):
        return StepStatus.ASSERT_FAILURE
    return StepStatus.RUNNER_FAILURE
