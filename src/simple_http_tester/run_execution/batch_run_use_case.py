"""Batch run use-case service."""

from __future__ import annotations

import logging
import time
from typing import TextIO

import click

from simple_http_tester.execution.engine_contracts import Engine, ExecutionOptions
from simple_http_tester.execution.execution_adapter import RunPosition, execute_source
from simple_http_tester.execution.progress import ProgressObserver
from simple_http_tester.input_resolution import read_source_content

from .run_contracts import BatchRunOutcome, BatchRunRequest, RunRecord
from .run_output import RunOutputWriter
from .run_record_collector import RunRecordCollector

_LOGGER = logging.getLogger("simple_http_tester.run")


def execute_batch_run(
    request: BatchRunRequest,
    *,
    engine: Engine,
    observer: ProgressObserver | None = None,
    stdin: TextIO | None = None,
    output_writer: RunOutputWriter | None = None,
) -> BatchRunOutcome:
    """Execute every source in order and collect one record per source.

    Raises:
      SourceAccessError: If a source cannot be read; earlier records are discarded.
      ParseFailure: If the engine rejects a source.
      OutputWriteError: If a run output cannot be written.
    """
    resolved_stdin = stdin or click.get_text_stream("stdin")
    resolved_output_writer = output_writer or RunOutputWriter(
        request.output_type, request.output_path
    )
    collector = RunRecordCollector()
    total = len(request.sources)

    start = time.monotonic()
    for index, source in enumerate(request.sources, start=1):
        content = read_source_content(source, stdin=resolved_stdin)
        options = ExecutionOptions(
            filename=source,
            context_dir=request.context_dir,
            verbose=request.verbose,
            settings=dict(request.engine_options),
        )
        _LOGGER.debug("Executing %s [%d/%d]", source, index, total)
        outcome = execute_source(
            engine,
            content,
            options,
            request.variables,
            position=RunPosition(index=index, total=total),
            observer=observer,
        )
        record = RunRecord(content=content, source=source, outcome=outcome)
        resolved_output_writer.write(record)
        collector.append(record)
    duration_ms = int((time.monotonic() - start) * 1000)

    return BatchRunOutcome(records=collector.records, duration_ms=duration_ms)
