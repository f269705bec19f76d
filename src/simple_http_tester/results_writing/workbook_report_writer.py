"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from simple_http_tester.severity import BatchSeverity

from .report_models import TestcaseReport
from .run_summary import RunSummary

RUNS_SHEET_NAME = "Runs"
RUN_INFO_SHEET_NAME = "RunInfo"

RUN_COLUMNS = (
    "File",
    "Status",
    "Requests",
    "Duration (ms)",
    "Assert errors",
    "Runner errors",
)
_COLUMN_WIDTHS = (40, 12, 10, 14, 60, 60)


def write_results_workbook(
    output_path: Path | str,
    testcases: Sequence[TestcaseReport],
    summary: RunSummary,
    severity: BatchSeverity,
) -> None:
    """Write a workbook with one row per run and a RunInfo sheet."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = RUNS_SHEET_NAME
    _write_header(sheet)
    for row, testcase in enumerate(testcases, start=2):
        _write_testcase_row(sheet, row, testcase)
    _write_run_info_sheet(workbook, summary, severity)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def _write_header(sheet) -> None:
    for column, (label, width) in enumerate(zip(RUN_COLUMNS, _COLUMN_WIDTHS), start=1):
        sheet.cell(row=1, column=column, value=label)
        sheet.cell(row=1, column=column).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column)].width = width


def _write_testcase_row(sheet, row: int, testcase: TestcaseReport) -> None:
    values = (
        testcase.name,
        "OK" if testcase.success else "FAILED",
        len(testcase.steps),
        testcase.time_in_ms,
        "\n".join(failure.describe() for failure in testcase.assertion_failures),
        "\n".join(failure.describe() for failure in testcase.runner_failures),
    )
    for column, value in enumerate(values, start=1):
        sheet.cell(row=row, column=column, value=_cell_value(value))


def _cell_value(value):
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _write_run_info_sheet(workbook, summary: RunSummary, severity: BatchSeverity) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("generated_at", datetime.now(UTC).isoformat()),
        ("total", summary.total),
        ("succeeded", summary.succeeded),
        ("failed", summary.failed),
        ("duration_ms", summary.duration_ms),
        ("severity", severity.name),
        ("exit_code", int(severity.exit_code)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
