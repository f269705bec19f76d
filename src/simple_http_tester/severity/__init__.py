"""Batch severity classification exports."""

from .batch_severity import BatchSeverity, ExitCode, classify_batch, classify_outcome

__all__ = [
    "BatchSeverity",
    "ExitCode",
    "classify_batch",
    "classify_outcome",
]
