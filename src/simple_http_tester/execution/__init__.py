"""Execution engine adapter exports."""

from .engine_contracts import (
    ComputedValue,
    Cookie,
    Engine,
    ExecutionOptions,
    ExecutionOutcome,
    ParseFailure,
    RunError,
    StepResult,
    Value,
)
from .engine_loading import ENGINE_ENTRY_POINT_GROUP, EngineLoadError, load_engine
from .execution_adapter import RunPosition, execute_source
from .progress import ConsoleProgressReporter, NullProgressObserver, ProgressObserver
from .variable_environment import NEW_UUID_VARIABLE, build_variable_environment

__all__ = [
    "ComputedValue",
    "Cookie",
    "Engine",
    "ExecutionOptions",
    "ExecutionOutcome",
    "ParseFailure",
    "RunError",
    "StepResult",
    "Value",
    "ENGINE_ENTRY_POINT_GROUP",
    "EngineLoadError",
    "load_engine",
    "RunPosition",
    "execute_source",
    "ConsoleProgressReporter",
    "NullProgressObserver",
    "ProgressObserver",
    "NEW_UUID_VARIABLE",
    "build_variable_environment",
]
