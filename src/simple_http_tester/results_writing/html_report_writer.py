"""HTML report bundle writer."""

from __future__ import annotations

import html
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from .report_models import TestcaseReport

STORE_DIRNAME = "store"
INDEX_FILENAME = "index.html"

_TOKEN_PATTERN = re.compile(r"\{\{([A-Z_]+)\}\}")

_INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Test Report</title>
<style>{{STYLE}}</style>
</head>
<body>
<h1>Test Report</h1>
<p class="summary">{{GENERATED_AT}} &middot; {{TOTAL}} file(s), {{SUCCEEDED}} succeeded, {{FAILED}} failed</p>
<table>
<thead><tr><th>File</th><th>Status</th><th>Requests</th><th>Duration</th></tr></thead>
<tbody>
{{ROWS}}
</tbody>
</table>
</body>
</html>
"""

_DETAIL_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{NAME}}</title>
<style>{{STYLE}}</style>
</head>
<body>
<p><a href="../index.html">Back to report</a></p>
<h1>{{NAME}}</h1>
<p class="{{STATUS_CLASS}}">{{STATUS}} in {{TIME}} ms</p>
<h2>Entries</h2>
<table>
<thead><tr><th>Entry</th><th>Status</th><th>Duration</th></tr></thead>
<tbody>
{{STEPS}}
</tbody>
</table>
<h2>Errors</h2>
<ul>
{{FAILURES}}
</ul>
<h2>Source</h2>
<pre class="source">{{SOURCE}}</pre>
</body>
</html>
"""

_STYLE = (
    "body{font-family:sans-serif;margin:2em}"
    "table{border-collapse:collapse}"
    "td,th{border:1px solid #ccc;padding:4px 8px;text-align:left}"
    ".success{color:#2e7d32}.failure{color:#c62828}"
    ".source{background:#f5f5f5;padding:1em;overflow:auto}"
)


@dataclass(frozen=True)
class _RenderedPage:
    relative_path: str
    html: str


def write_html_report(
    report_dir: Path | str,
    testcases: Sequence[TestcaseReport],
    contents: Sequence[str],
) -> Path:
    """Write one detail page per testcase under `store/`, then the index page.

    Returns:
      The index page path.
    """
    if len(testcases) != len(contents):
        raise ValueError("Each testcase needs its source content.")
    base = Path(report_dir)
    pages = [
        _RenderedPage(
            relative_path=detail_page_path(position),
            html=render_detail_page(testcase, content),
        )
        for position, (testcase, content) in enumerate(zip(testcases, contents), start=1)
    ]
    index_html = render_index_page(testcases, [page.relative_path for page in pages])

    (base / STORE_DIRNAME).mkdir(parents=True, exist_ok=True)
    for page in pages:
        (base / page.relative_path).write_text(page.html, encoding="utf-8")
    index_path = base / INDEX_FILENAME
    index_path.write_text(index_html, encoding="utf-8")
    return index_path


def detail_page_path(position: int) -> str:
    return f"{STORE_DIRNAME}/run-{position:04d}.html"


def render_index_page(testcases: Sequence[TestcaseReport], links: Sequence[str]) -> str:
    rows = "\n".join(
        "<tr>"
        f'<td><a href="{html.escape(link)}">{html.escape(testcase.name)}</a></td>'
        f'<td class="{_status_class(testcase)}">{_status_label(testcase)}</td>'
        f"<td>{len(testcase.steps)}</td>"
        f"<td>{testcase.time_in_ms} ms</td>"
        "</tr>"
        for testcase, link in zip(testcases, links)
    )
    succeeded = sum(1 for testcase in testcases if testcase.success)
    return _replace_tokens(
        _INDEX_TEMPLATE,
        STYLE=_STYLE,
        GENERATED_AT=datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC"),
        TOTAL=len(testcases),
        SUCCEEDED=succeeded,
        FAILED=len(testcases) - succeeded,
        ROWS=rows,
    )


def render_detail_page(testcase: TestcaseReport, content: str) -> str:
    steps = "\n".join(
        f"<tr><td>{step.entry_index}</td><td>{step.status.value}</td>"
        f"<td>{step.time_in_ms} ms</td></tr>"
        for step in testcase.steps
    )
    failures = "\n".join(
        f"<li>{html.escape(failure.describe())}</li>" for failure in testcase.failures
    )
    return _replace_tokens(
        _DETAIL_TEMPLATE,
        STYLE=_STYLE,
        NAME=html.escape(testcase.name),
        STATUS=_status_label(testcase),
        STATUS_CLASS=_status_class(testcase),
        TIME=testcase.time_in_ms,
        STEPS=steps,
        FAILURES=failures,
        SOURCE=html.escape(content),
    )


def _status_label(testcase: TestcaseReport) -> str:
    return "Success" if testcase.success else "Failure"


def _status_class(testcase: TestcaseReport) -> str:
    return "success" if testcase.success else "failure"


def _replace_tokens(template: str, **tokens) -> str:
    return _TOKEN_PATTERN.sub(lambda match: str(tokens[match.group(1)]), template)
