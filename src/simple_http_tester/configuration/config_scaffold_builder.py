"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "http-tester.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for simple-http-tester.
# Every section is optional; remove the ones you do not need.
# Command line options always override the values below.

# Variables available to every test definition of the run.
# Values keep their YAML type (string, boolean, number or null).
variables:
  host: "<OPTIONAL>"
  # token: "<OPTIONAL>"

# Execution engine as a "module:attribute" reference.
# Leave unset to use the engine registered by an installed package.
# engine: "<OPTIONAL>"

# Free-form options handed to the engine with every run.
engine_options:
  # timeout_seconds: "<OPTIONAL>"

# Report targets, relative paths resolve against this file's directory.
reports:
  # junit: "<OPTIONAL>"
  # html: "<OPTIONAL>"
  # cookie_jar: "<OPTIONAL>"
  # workbook: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
