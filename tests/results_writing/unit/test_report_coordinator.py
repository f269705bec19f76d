"""Report coordinator tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl.utils.exceptions import IllegalCharacterError
from simple_http_tester.configuration import ReportTargets
from simple_http_tester.execution import Cookie, ExecutionOutcome, RunError, StepResult
from simple_http_tester.results_writing import report_coordinator
from simple_http_tester.results_writing import ReportWritingError, write_requested_reports
from simple_http_tester.run_execution import RunRecord


def _record(source: str = "login.http") -> RunRecord:
    return RunRecord(
        content="POST http://localhost/login\n",
        source=source,
        outcome=ExecutionOutcome(
            steps=(),
            time_in_ms=1,
            success=True,
            cookies=(
                Cookie(
                    domain="localhost",
                    include_subdomain=False,
                    path="/",
                    https=False,
                    expires=0,
                    name="session",
                    value="abc",
                ),
            ),
        ),
    )


def test_no_target_writes_nothing(tmp_path: Path) -> None:
    assert write_requested_reports([_record()], ReportTargets(), duration_ms=1) == []
    assert list(tmp_path.iterdir()) == []


def test_writes_every_requested_report(tmp_path: Path) -> None:
    targets = ReportTargets(
        junit_file=tmp_path / "junit.xml",
        html_dir=tmp_path / "html",
        cookie_jar_file=tmp_path / "cookies.txt",
        workbook_file=tmp_path / "results.xlsx",
    )

    written = write_requested_reports([_record()], targets, duration_ms=12)

    assert written == [
        tmp_path / "junit.xml",
        tmp_path / "html",
        tmp_path / "cookies.txt",
        tmp_path / "results.xlsx",
    ]
    assert (tmp_path / "junit.xml").is_file()
    assert (tmp_path / "html" / "index.html").is_file()
    assert "session\tabc" in (tmp_path / "cookies.txt").read_text(encoding="utf-8")
    assert (tmp_path / "results.xlsx").is_file()


def test_cookie_jar_for_several_runs_fails_and_writes_no_file(tmp_path: Path) -> None:
    targets = ReportTargets(cookie_jar_file=tmp_path / "cookies.txt")

    with pytest.raises(ReportWritingError, match="unique session"):
        write_requested_reports([_record("a.http"), _record("b.http")], targets, duration_ms=1)
    assert not (tmp_path / "cookies.txt").exists()


def test_cookie_jar_for_empty_batch_fails(tmp_path: Path) -> None:
    targets = ReportTargets(cookie_jar_file=tmp_path / "cookies.txt")

    with pytest.raises(ReportWritingError, match="no results to extract cookies from"):
        write_requested_reports([], targets, duration_ms=0)


def test_first_failure_stops_later_writers(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    targets = ReportTargets(
        junit_file=tmp_path / "junit.xml",
        html_dir=blocker / "html",
        workbook_file=tmp_path / "results.xlsx",
    )

    with pytest.raises(ReportWritingError, match="Issue writing HTML report"):
        write_requested_reports([_record()], targets, duration_ms=1)
    assert (tmp_path / "junit.xml").is_file()
    assert not (tmp_path / "results.xlsx").exists()


def test_control_characters_in_error_messages_still_produce_reports(tmp_path: Path) -> None:
    record = RunRecord(
        content="GET http://localhost\n",
        source="colored.http",
        outcome=ExecutionOutcome(
            steps=(
                StepResult(
                    entry_index=1,
                    errors=(RunError(message="boom \x1b[31mred\x1b[0m", assertion=False),),
                ),
            ),
            time_in_ms=3,
            success=False,
        ),
    )
    targets = ReportTargets(
        junit_file=tmp_path / "junit.xml",
        workbook_file=tmp_path / "results.xlsx",
    )

    written = write_requested_reports([record], targets, duration_ms=3)

    assert written == [tmp_path / "junit.xml", tmp_path / "results.xlsx"]


def test_rejected_workbook_cell_is_a_report_writing_error(monkeypatch, tmp_path: Path) -> None:
    def rejecting_writer(*args, **kwargs):
        raise IllegalCharacterError("\x1b cannot be used in worksheets.")

    monkeypatch.setattr(report_coordinator, "write_results_workbook", rejecting_writer)
    targets = ReportTargets(workbook_file=tmp_path / "results.xlsx")

    with pytest.raises(ReportWritingError, match="Issue writing results workbook"):
        write_requested_reports([_record()], targets, duration_ms=1)
