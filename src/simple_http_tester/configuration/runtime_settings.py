"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from simple_http_tester.execution.engine_contracts import Value


class OutputType(str, Enum):
    """What is written to the output after each run."""

    RESPONSE_BODY = "body"
    JSON = "json"
    NONE = "none"


@dataclass(frozen=True)
class ReportTargets:
    """Report artifacts requested for a batch run."""

    junit_file: Path | None = None
    html_dir: Path | None = None
    cookie_jar_file: Path | None = None
    workbook_file: Path | None = None

    def merged_with(self, overrides: ReportTargets) -> ReportTargets:
        """Return targets where every target set in `overrides` wins."""
        return ReportTargets(
            junit_file=overrides.junit_file or self.junit_file,
            html_dir=overrides.html_dir or self.html_dir,
            cookie_jar_file=overrides.cookie_jar_file or self.cookie_jar_file,
            workbook_file=overrides.workbook_file or self.workbook_file,
        )


@dataclass(frozen=True)
class RunConfiguration:
    """Settings read from a YAML run configuration file."""

    path: Path | None = None
    variables: Mapping[str, Value] = field(default_factory=dict)
    engine: str | None = None
    engine_options: Mapping[str, object] = field(default_factory=dict)
    reports: ReportTargets = field(default_factory=ReportTargets)


@dataclass(frozen=True)
class ConsoleSettings:
    """Terminal related settings decided once at startup."""

    color: bool
    verbose: bool
    progress_bar: bool
