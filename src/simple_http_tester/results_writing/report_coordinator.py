"""Coordinates the report writers requested for a batch run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from openpyxl.utils.exceptions import IllegalCharacterError

from simple_http_tester.configuration.runtime_settings import ReportTargets
from simple_http_tester.run_execution.run_contracts import RunRecord
from simple_http_tester.severity import classify_batch

from .cookie_jar_writer import CookieJarError, write_cookie_jar
from .html_report_writer import write_html_report
from .junit_report_writer import write_junit_report
from .report_models import build_testcase_report
from .run_summary import summarize_runs
from .workbook_report_writer import write_results_workbook

_LOGGER = logging.getLogger("simple_http_tester.reports")


class ReportWritingError(Exception):
    """Raised when a requested report artifact cannot be written."""


def write_requested_reports(
    records: Sequence[RunRecord],
    targets: ReportTargets,
    *,
    duration_ms: int,
) -> list[Path]:
    """Write every requested report in turn, stopping at the first failure.

    Every artifact is derived from `records` alone.

    Returns:
      The written report paths, in writing order.

    Raises:
      ReportWritingError: If a report cannot be written.
    """
    testcases = [build_testcase_report(record) for record in records]
    writers: list[tuple[str, Path | None, Callable[[Path], object]]] = [
        (
            "JUnit report",
            targets.junit_file,
            lambda path: write_junit_report(path, testcases),
        ),
        (
            "HTML report",
            targets.html_dir,
            lambda path: write_html_report(
                path, testcases, [record.content for record in records]
            ),
        ),
        (
            "cookies",
            targets.cookie_jar_file,
            lambda path: write_cookie_jar(path, records),
        ),
        (
            "results workbook",
            targets.workbook_file,
            lambda path: write_results_workbook(
                path,
                testcases,
                summarize_runs(records, duration_ms),
                classify_batch(record.outcome for record in records),
            ),
        ),
    ]

    written: list[Path] = []
    for label, target, write in writers:
        if target is None:
            continue
        _LOGGER.debug("Writing %s to %s", label, target)
        try:
            write(target)
        except (OSError, ValueError, CookieJarError, IllegalCharacterError) as exc:
            raise ReportWritingError(f"Issue writing {label} to {target}: {exc}") from exc
        written.append(target)
    return written
