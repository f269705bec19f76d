"""Append-only collection of run records."""

from __future__ import annotations

from .run_contracts import RunRecord


class RunRecordCollector:
    """Keeps run records in processing order."""

    def __init__(self) -> None:
        self._records: list[RunRecord] = []

    def append(self, record: RunRecord) -> None:
        self._records.append(record)

    @property
    def records(self) -> tuple[RunRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)
