"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .environment import is_ci, resolve_color, use_progress_bar
from .loader import (
    ConfigurationError,
    load_run_configuration,
    load_variables_file,
    parse_variable_assignment,
    parse_variable_assignments,
    parse_variable_value,
)
from .runtime_settings import ConsoleSettings, OutputType, ReportTargets, RunConfiguration

__all__ = [
    "ConsoleSettings",
    "OutputType",
    "ReportTargets",
    "RunConfiguration",
    "ConfigurationError",
    "load_run_configuration",
    "load_variables_file",
    "parse_variable_assignment",
    "parse_variable_assignments",
    "parse_variable_value",
    "is_ci",
    "resolve_color",
    "use_progress_bar",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
