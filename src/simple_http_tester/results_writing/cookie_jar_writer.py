"""Netscape cookie jar writer."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from simple_http_tester.run_execution.run_contracts import RunRecord

COOKIE_JAR_HEADER = "# Netscape HTTP Cookie File\n# This file was generated by simple-http-tester\n\n"


class CookieJarError(Exception):
    """Raised when cookies cannot be extracted from the run records."""


def render_cookie_jar(records: Sequence[RunRecord]) -> str:
    """Render the cookies of the single run of a batch."""
    if not records:
        raise CookieJarError("no results to extract cookies from")
    if len(records) > 1:
        raise CookieJarError(
            f"cookies can only be saved for a unique session, got {len(records)} runs"
        )
    lines = [f"{cookie.to_netscape_line()}\n" for cookie in records[0].outcome.cookies]
    return COOKIE_JAR_HEADER + "".join(lines)


def write_cookie_jar(output_path: Path | str, records: Sequence[RunRecord]) -> None:
    """Write the Netscape cookie file; nothing is written when rendering fails."""
    text = render_cookie_jar(records)
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
