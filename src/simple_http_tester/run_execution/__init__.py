"""Run execution domain exports."""

from .batch_run_use_case import execute_batch_run
from .run_contracts import BatchRunOutcome, BatchRunRequest, RunRecord
from .run_output import OutputWriteError, RunOutputWriter, render_run_output, run_record_to_json
from .run_record_collector import RunRecordCollector

__all__ = [
    "BatchRunOutcome",
    "BatchRunRequest",
    "RunRecord",
    "RunRecordCollector",
    "OutputWriteError",
    "RunOutputWriter",
    "render_run_output",
    "run_record_to_json",
    "execute_batch_run",
]
