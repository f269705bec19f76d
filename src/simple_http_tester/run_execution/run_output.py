"""Immediate per-run output: response body or JSON result."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, BinaryIO

import click

from simple_http_tester.configuration.runtime_settings import OutputType

from .run_contracts import RunRecord


class OutputWriteError(Exception):
    """Raised when a run result cannot be written to the output."""


class RunOutputWriter:
    """Writes each run's output to a file or to stdout.

    The output file is truncated on the first write of the batch, then appended.
    """

    def __init__(
        self,
        output_type: OutputType,
        output_path: Path | None = None,
        *,
        stdout: BinaryIO | None = None,
    ) -> None:
        self._output_type = output_type
        self._output_path = output_path
        self._stdout = stdout
        self._started = False

    def write(self, record: RunRecord) -> None:
        payload = render_run_output(record, self._output_type)
        if payload is None:
            return
        try:
            self._write_bytes(payload)
        except OSError as exc:
            destination = self._output_path or "standard output"
            raise OutputWriteError(f"Issue writing to {destination}: {exc}") from exc

    def _write_bytes(self, payload: bytes) -> None:
        if self._output_path is None:
            stream = self._stdout or click.get_binary_stream("stdout")
            stream.write(payload)
            stream.flush()
            return
        mode = "ab" if self._started else "wb"
        with self._output_path.open(mode) as handle:
            handle.write(payload)
        self._started = True


def render_run_output(record: RunRecord, output_type: OutputType) -> bytes | None:
    """Return the bytes to output for a record, or None when nothing applies."""
    if output_type == OutputType.JSON:
        document = json.dumps(run_record_to_json(record), ensure_ascii=False)
        return (document + "\n").encode("utf-8")
    if output_type == OutputType.RESPONSE_BODY and record.outcome.success:
        if not record.outcome.steps:
            return None
        return record.outcome.steps[-1].response_body
    return None


def run_record_to_json(record: RunRecord) -> dict[str, Any]:
    outcome = record.outcome
    return {
        "filename": record.source,
        "success": outcome.success,
        "time": outcome.time_in_ms,
        "entries": [
            {
                "index": step.entry_index,
                "time": step.time_in_ms,
                "errors": [
                    {"kind": error.kind, "message": error.message, "line": error.line}
                    for error in step.errors
                ],
            }
            for step in outcome.steps
        ],
        "cookies": [asdict(cookie) for cookie in outcome.cookies],
    }
