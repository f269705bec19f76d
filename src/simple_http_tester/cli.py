"""Command line interface entry point."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import click

from simple_http_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    ConsoleSettings,
    OutputType,
    ReportTargets,
    RunConfiguration,
    load_run_configuration,
    load_variables_file,
    parse_variable_assignments,
    resolve_color,
    use_progress_bar,
    write_placeholder_configuration,
)
from simple_http_tester.console_logging import configure_cli_logging
from simple_http_tester.execution import (
    ConsoleProgressReporter,
    EngineLoadError,
    NullProgressObserver,
    ParseFailure,
    Value,
    load_engine,
)
from simple_http_tester.input_resolution import (
    SourceAccessError,
    expand_glob_patterns,
    resolve_input_sources,
)
from simple_http_tester.results_writing import (
    ReportWritingError,
    render_run_summary,
    write_requested_reports,
)
from simple_http_tester.run_execution import (
    BatchRunRequest,
    OutputWriteError,
    execute_batch_run,
)
from simple_http_tester.severity import ExitCode, classify_batch


class CliError(Exception):
    """Fatal CLI error carrying the process exit code."""

    def __init__(self, message: str, exit_code: int = ExitCode.COMMANDLINE) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


@dataclass(frozen=True)
class _RunOptions:  # pylint: disable=too-many-instance-attributes
    """Raw option values of the run command."""

    files: tuple[str, ...]
    glob_patterns: tuple[str, ...]
    test: bool
    json_output: bool
    output_path: str | None
    variables: tuple[str, ...]
    variables_file: str | None
    config_path: str | None
    engine: str | None
    targets: ReportTargets


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="simple-http-tester")
def cli() -> None:
    """Batch runner for declarative HTTP test definitions."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.argument("files", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--glob",
    "glob_patterns",
    multiple=True,
    help="Glob pattern of test definition files to run (repeatable)",
)
@click.option("--test", is_flag=True, default=False, help="Run in test mode and print a summary.")
@click.option("--json", "json_output", is_flag=True, default=False, help="Output each run as JSON.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=str),
    help="Write run output to this file instead of stdout",
)
@click.option(
    "--variable",
    "variables",
    multiple=True,
    metavar="NAME=VALUE",
    help="Define a variable (repeatable)",
)
@click.option(
    "--variables-file",
    type=click.Path(path_type=str),
    help="File of NAME=VALUE variable definitions",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str),
    help="Path to a YAML run configuration file",
)
@click.option("--engine", help="Execution engine as module:attribute")
@click.option("--report-junit", type=click.Path(path_type=Path), help="Write a JUnit XML report")
@click.option("--report-html", type=click.Path(path_type=Path), help="Write an HTML report bundle")
@click.option(
    "--report-workbook",
    type=click.Path(path_type=Path),
    help="Write an xlsx results workbook",
)
@click.option(
    "--cookie-jar",
    type=click.Path(path_type=Path),
    help="Write the session cookies in Netscape format (single file runs only)",
)
@click.option("--color/--no-color", default=None, help="Force colored output on or off.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Print debug information.")
@click.pass_context
def run_tests(  # pylint: disable=too-many-arguments,too-many-locals
    ctx: click.Context,
    files: tuple[str, ...],
    glob_patterns: tuple[str, ...],
    test: bool,
    json_output: bool,
    output_path: str | None,
    variables: tuple[str, ...],
    variables_file: str | None,
    config_path: str | None,
    engine: str | None,
    report_junit: Path | None,
    report_html: Path | None,
    report_workbook: Path | None,
    cookie_jar: Path | None,
    color: bool | None,
    verbose: bool,
) -> None:
    """Execute test definition FILES one after the other."""
    options = _RunOptions(
        files=files,
        glob_patterns=glob_patterns,
        test=test,
        json_output=json_output,
        output_path=output_path,
        variables=variables,
        variables_file=variables_file,
        config_path=config_path,
        engine=engine,
        targets=ReportTargets(
            junit_file=report_junit,
            html_dir=report_html,
            cookie_jar_file=cookie_jar,
            workbook_file=report_workbook,
        ),
    )
    console = ConsoleSettings(
        color=resolve_color(color, stdout_is_terminal=sys.stdout.isatty(), environ=os.environ),
        verbose=verbose,
        progress_bar=use_progress_bar(
            test_mode=test,
            verbose=verbose,
            stderr_is_terminal=sys.stderr.isatty(),
            environ=os.environ,
        ),
    )
    logger = configure_cli_logging(color=console.color, verbose=console.verbose)

    configuration = _load_configuration(options.config_path)
    targets = configuration.reports.merged_with(options.targets)

    resolution = resolve_input_sources(
        options.files,
        expand_glob_patterns(options.glob_patterns),
        stdin_is_interactive=_stdin_is_interactive(),
    )
    if resolution.show_help:
        click.echo(ctx.get_help())
        ctx.exit(ExitCode.COMMANDLINE)
    if targets.cookie_jar_file is not None and len(resolution.sources) > 1:
        raise CliError("Only save cookies for a unique session", ExitCode.COMMANDLINE)

    try:
        resolved_engine = load_engine(options.engine or configuration.engine)
    except EngineLoadError as exc:
        raise CliError(str(exc), ExitCode.COMMANDLINE) from exc

    request = BatchRunRequest(
        sources=resolution.sources,
        context_dir=Path.cwd(),
        variables=_merge_variables(configuration, options),
        engine_options=configuration.engine_options,
        output_type=_output_type(options),
        output_path=Path(options.output_path) if options.output_path else None,
        verbose=console.verbose,
    )
    observer = (
        ConsoleProgressReporter(color=console.color, progress_bar=console.progress_bar)
        if options.test
        else NullProgressObserver()
    )
    try:
        batch = execute_batch_run(request, engine=resolved_engine, observer=observer)
    except (SourceAccessError, ParseFailure) as exc:
        raise CliError(str(exc), ExitCode.PARSING) from exc
    except OutputWriteError as exc:
        raise CliError(str(exc), ExitCode.RUNTIME) from exc

    try:
        write_requested_reports(batch.records, targets, duration_ms=batch.duration_ms)
    except ReportWritingError as exc:
        raise CliError(str(exc), ExitCode.UNDEFINED) from exc

    if options.test:
        logger.info(render_run_summary(batch.records, batch.duration_ms))

    exit_code = classify_batch(batch.outcomes).exit_code
    if exit_code != ExitCode.OK:
        ctx.exit(exit_code)


def _stdin_is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _load_configuration(config_path: str | None) -> RunConfiguration:
    if config_path is None:
        return RunConfiguration()
    try:
        return load_run_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc), ExitCode.COMMANDLINE) from exc


def _merge_variables(configuration: RunConfiguration, options: _RunOptions) -> dict[str, Value]:
    """Merge variables: configuration, then variables file, then command line."""
    merged: dict[str, Value] = dict(configuration.variables)
    try:
        if options.variables_file:
            merged.update(load_variables_file(options.variables_file))
        merged.update(parse_variable_assignments(options.variables))
    except ConfigurationError as exc:
        raise CliError(str(exc), ExitCode.COMMANDLINE) from exc
    return merged


def _output_type(options: _RunOptions) -> OutputType:
    if options.json_output:
        return OutputType.JSON
    if options.test:
        return OutputType.NONE
    return OutputType.RESPONSE_BODY


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"error: {exc}", err=True)
        return exc.exit_code
    except click.UsageError as exc:
        exc.show()
        return ExitCode.COMMANDLINE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
