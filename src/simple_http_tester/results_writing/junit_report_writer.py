"""JUnit XML report writer."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path

from .report_models import TestcaseReport

TESTSUITE_NAME = "simple-http-tester"

# Characters outside the XML 1.0 Char production.
_XML_ILLEGAL_RE = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def write_junit_report(output_path: Path | str, testcases: Sequence[TestcaseReport]) -> None:
    """Write a JUnit report with one testcase per run record."""
    document = render_junit_report(testcases)
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(document)


def render_junit_report(testcases: Sequence[TestcaseReport]) -> bytes:
    errors = sum(1 for testcase in testcases if testcase.runner_failures)
    failures = sum(
        1
        for testcase in testcases
        if testcase.assertion_failures and not testcase.runner_failures
    )
    root = ET.Element("testsuites")
    suite = ET.SubElement(
        root,
        "testsuite",
        {
            "name": TESTSUITE_NAME,
            "tests": str(len(testcases)),
            "failures": str(failures),
            "errors": str(errors),
            "time": _seconds(sum(testcase.time_in_ms for testcase in testcases)),
        },
    )
    for testcase in testcases:
        _append_testcase(suite, testcase)
    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


def _append_testcase(suite: ET.Element, testcase: TestcaseReport) -> None:
    element = ET.SubElement(
        suite,
        "testcase",
        {
            "id": _xml_text(testcase.name),
            "name": _xml_text(testcase.name),
            "time": _seconds(testcase.time_in_ms),
        },
    )
    for failure in testcase.assertion_failures:
        node = ET.SubElement(element, "failure", {"message": _xml_text(failure.message)})
        node.text = _xml_text(failure.describe())
    for failure in testcase.runner_failures:
        node = ET.SubElement(element, "error", {"message": _xml_text(failure.message)})
        node.text = _xml_text(failure.describe())
    if testcase.steps:
        system_out = ET.SubElement(element, "system-out")
        system_out.text = "\n".join(
            f"entry {step.entry_index}: {step.status.value} ({step.time_in_ms} ms)"
            for step in testcase.steps
        )


def _xml_text(value: str) -> str:
    return _XML_ILLEGAL_RE.sub("", value)


def _seconds(time_in_ms: int) -> str:
    return f"{time_in_ms / 1000:.3f}"
