"""Execution engine contract entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TypeAlias, Union


class ParseFailure(Exception):
    """Raised by an engine when a test definition cannot be parsed."""


@dataclass(frozen=True)
class ComputedValue:
    """Variable whose value is produced each time the engine references it."""

    generator: Callable[[], "Value"]

    def evaluate(self) -> "Value":
        return self.generator()


Value: TypeAlias = Union[str, bool, int, float, None, ComputedValue]


@dataclass(frozen=True)
class RunError:
    """Error raised while executing one step of a test definition.

    `assertion` is true when a check on the response failed; otherwise the
    step itself could not be performed (network, protocol or engine failure).
    """

    message: str
    assertion: bool
    line: int | None = None

    @property
    def kind(self) -> str:
        return "assert" if self.assertion else "runner"


@dataclass(frozen=True)
class StepResult:
    """Result of executing one request step."""

    entry_index: int
    errors: tuple[RunError, ...] = ()
    time_in_ms: int = 0
    response_body: bytes | None = None

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class Cookie:  # pylint: disable=too-many-instance-attributes
    """Cookie accumulated by the engine during one run."""

    domain: str
    include_subdomain: bool
    path: str
    https: bool
    expires: int
    name: str
    value: str
    http_only: bool = False

    def to_netscape_line(self) -> str:
        domain = f"#HttpOnly_{self.domain}" if self.http_only else self.domain
        return "\t".join(
            (
                domain,
                _netscape_flag(self.include_subdomain),
                self.path,
                _netscape_flag(self.https),
                str(self.expires),
                self.name,
                self.value,
            )
        )


@dataclass(frozen=True)
class ExecutionOutcome:
    """Structured result of running one source against the engine."""

    steps: tuple[StepResult, ...]
    time_in_ms: int
    success: bool
    cookies: tuple[Cookie, ...] = ()

    def errors(self) -> list[RunError]:
        return [error for step in self.steps for error in step.errors]


@dataclass(frozen=True)
class ExecutionOptions:
    """Options handed to the engine for one source."""

    filename: str
    context_dir: Path
    verbose: bool = False
    settings: Mapping[str, object] = field(default_factory=dict)


class Engine(Protocol):
    """Callable executing one test definition."""

    def __call__(
        self,
        content: str,
        options: ExecutionOptions,
        variables: Mapping[str, Value],
    ) -> ExecutionOutcome: ...


def _netscape_flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"
