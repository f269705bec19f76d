"""Results writing domain exports."""

from .cookie_jar_writer import COOKIE_JAR_HEADER, CookieJarError, render_cookie_jar, write_cookie_jar
from .html_report_writer import INDEX_FILENAME, STORE_DIRNAME, write_html_report
from .junit_report_writer import render_junit_report, write_junit_report
from .report_coordinator import ReportWritingError, write_requested_reports
from .report_models import (
    FailureMessage,
    StepReport,
    StepStatus,
    TestcaseReport,
    build_testcase_report,
)
from .run_summary import RunSummary, render_run_summary, summarize_runs
from .workbook_report_writer import write_results_workbook

__all__ = [
    "COOKIE_JAR_HEADER",
    "CookieJarError",
    "render_cookie_jar",
    "write_cookie_jar",
    "INDEX_FILENAME",
    "STORE_DIRNAME",
    "write_html_report",
    "render_junit_report",
    "write_junit_report",
    "ReportWritingError",
    "write_requested_reports",
    "FailureMessage",
    "StepReport",
    "StepStatus",
    "TestcaseReport",
    "build_testcase_report",
    "RunSummary",
    "render_run_summary",
    "summarize_runs",
    "write_results_workbook",
]
