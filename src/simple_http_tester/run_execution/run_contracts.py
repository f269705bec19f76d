"""Run execution entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from simple_http_tester.configuration.runtime_settings import OutputType
from simple_http_tester.execution.engine_contracts import ExecutionOutcome, Value


@dataclass(frozen=True)
class RunRecord:
    """Content, source and outcome of one executed source."""

    content: str
    source: str
    outcome: ExecutionOutcome


@dataclass(frozen=True)
class BatchRunRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for executing one batch of sources."""

    sources: tuple[str, ...]
    context_dir: Path
    variables: Mapping[str, Value] = field(default_factory=dict)
    engine_options: Mapping[str, object] = field(default_factory=dict)
    output_type: OutputType = OutputType.NONE
    output_path: Path | None = None
    verbose: bool = False


@dataclass(frozen=True)
class BatchRunOutcome:
    """Output contract for one completed batch."""

    records: tuple[RunRecord, ...]
    duration_ms: int

    @property
    def outcomes(self) -> Sequence[ExecutionOutcome]:
        return tuple(record.outcome for record in self.records)
