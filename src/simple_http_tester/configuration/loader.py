"""Run configuration and variable loading services."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from simple_http_tester.execution.engine_contracts import Value

from .runtime_settings import ReportTargets, RunConfiguration

_REPORT_KEYS = ("junit", "html", "cookie_jar", "workbook")
_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")


class ConfigurationError(Exception):
    """Raised when the run configuration or a variable definition is invalid."""


def load_run_configuration(config_path: Path | str) -> RunConfiguration:
    """Load and validate a YAML run configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(set(parsed) - {"variables", "engine", "engine_options", "reports"})
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(map(str, unknown))}")

    return RunConfiguration(
        path=path,
        variables=_parse_variables_section(parsed.get("variables")),
        engine=_optional_string(parsed.get("engine"), "engine"),
        engine_options=dict(_optional_mapping(parsed.get("engine_options"), "engine_options")),
        reports=_parse_reports_section(parsed.get("reports"), path.parent),
    )


def parse_variable_assignment(text: str) -> tuple[str, Value]:
    """Parse a `name=value` variable definition."""
    name, separator, raw_value = text.partition("=")
    name = name.strip()
    if not separator:
        raise ConfigurationError(f"Variable '{text}' must be defined as name=value.")
    if not name:
        raise ConfigurationError(f"Variable '{text}' has an empty name.")
    return name, parse_variable_value(raw_value)


def parse_variable_value(raw_value: str) -> Value:
    """Type a raw variable value: booleans, null, integers, floats, else string."""
    if raw_value in ("true", "false"):
        return raw_value == "true"
    if raw_value == "null":
        return None
    if _INTEGER_RE.fullmatch(raw_value):
        return int(raw_value)
    if _FLOAT_RE.fullmatch(raw_value):
        return float(raw_value)
    return raw_value


def load_variables_file(variables_path: Path | str) -> dict[str, Value]:
    """Read `name=value` lines, skipping blank lines and `#` comments."""
    path = Path(variables_path)
    if not path.exists():
        raise ConfigurationError(f"Variables file not found: {path}")
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read variables file {path}: {exc}") from exc
    return parse_variable_assignments(
        line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")
    )


def parse_variable_assignments(assignments: Iterable[str]) -> dict[str, Value]:
    variables: dict[str, Value] = {}
    for assignment in assignments:
        name, value = parse_variable_assignment(assignment)
        variables[name] = value
    return variables


def _parse_variables_section(value: Any) -> dict[str, Value]:
    section = _optional_mapping(value, "variables")
    variables: dict[str, Value] = {}
    for name, item in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("variables keys must be non-empty strings.")
        if item is not None and not isinstance(item, str | bool | int | float):
            raise ConfigurationError(f"variables.{name} must be a scalar value.")
        variables[name.strip()] = item
    return variables


def _parse_reports_section(value: Any, base_path: Path) -> ReportTargets:
    section = _optional_mapping(value, "reports")
    unknown = sorted(set(section) - set(_REPORT_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown reports entries: {', '.join(map(str, unknown))}")
    paths = {
        key: _optional_path(section.get(key), f"reports.{key}", base_path) for key in _REPORT_KEYS
    }
    return ReportTargets(
        junit_file=paths["junit"],
        html_dir=paths["html"],
        cookie_jar_file=paths["cookie_jar"],
        workbook_file=paths["workbook"],
    )


def _optional_path(value: Any, field_name: str, base_path: Path) -> Path | None:
    raw_path = _optional_string(value, field_name)
    if raw_path is None:
        return None
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
