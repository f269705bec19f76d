"""Batch run use-case tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from simple_http_tester.configuration import OutputType
from simple_http_tester.execution import (
    ExecutionOutcome,
    ParseFailure,
    RunError,
    StepResult,
)
from simple_http_tester.input_resolution import STDIN_SOURCE, SourceAccessError
from simple_http_tester.run_execution import (
    BatchRunRequest,
    RunOutputWriter,
    RunRecordCollector,
    execute_batch_run,
)
from simple_http_tester.run_execution.run_contracts import RunRecord


class _ScriptedEngine:
    """Engine returning an outcome driven by the first line of the content."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict]] = []

    def __call__(self, content, options, variables) -> ExecutionOutcome:
        self.calls.append((content, options.filename, dict(variables)))
        first_line = content.splitlines()[0] if content else ""
        if first_line == "parse-error":
            raise ParseFailure(f"{options.filename}:1: unexpected token")
        errors: tuple[RunError, ...] = ()
        if first_line == "assert":
            errors = (RunError(message="status 404", assertion=True, line=2),)
        elif first_line == "runner":
            errors = (RunError(message="connection refused", assertion=False, line=1),)
        return ExecutionOutcome(
            steps=(StepResult(entry_index=1, errors=errors, response_body=b"body"),),
            time_in_ms=5,
            success=not errors,
        )


def _write_sources(tmp_path: Path, **contents: str) -> dict[str, str]:
    paths = {}
    for name, content in contents.items():
        path = tmp_path / f"{name}.http"
        path.write_text(content, encoding="utf-8")
        paths[name] = str(path)
    return paths


def _request(tmp_path: Path, *sources: str, **kwargs) -> BatchRunRequest:
    return BatchRunRequest(sources=tuple(sources), context_dir=tmp_path, **kwargs)


def test_runs_sources_in_order_and_collects_records(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="ok\n", second="assert\n", third="runner\n")
    engine = _ScriptedEngine()

    outcome = execute_batch_run(
        _request(tmp_path, paths["first"], paths["second"], paths["third"], paths["first"]),
        engine=engine,
        stdin=io.StringIO(""),
    )

    assert [record.source for record in outcome.records] == [
        paths["first"],
        paths["second"],
        paths["third"],
        paths["first"],
    ]
    assert [record.content for record in outcome.records] == [
        "ok\n",
        "assert\n",
        "runner\n",
        "ok\n",
    ]
    assert [record.outcome.success for record in outcome.records] == [True, False, False, True]
    assert [call[1] for call in engine.calls] == [record.source for record in outcome.records]
    assert outcome.duration_ms >= 0


def test_stdin_sentinel_reads_standard_input(tmp_path: Path) -> None:
    engine = _ScriptedEngine()

    outcome = execute_batch_run(
        _request(tmp_path, STDIN_SOURCE),
        engine=engine,
        stdin=io.StringIO("ok\nGET http://localhost\n"),
    )

    assert outcome.records[0].source == STDIN_SOURCE
    assert outcome.records[0].content == "ok\nGET http://localhost\n"


def test_variables_and_engine_options_are_passed_to_engine(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="ok\n")
    seen_settings = []

    def engine(content, options, variables):
        seen_settings.append((options.settings, options.context_dir, variables["host"]))
        return ExecutionOutcome(steps=(), time_in_ms=0, success=True)

    execute_batch_run(
        _request(
            tmp_path,
            paths["first"],
            variables={"host": "http://localhost"},
            engine_options={"timeout_seconds": 3},
        ),
        engine=engine,
        stdin=io.StringIO(""),
    )

    assert seen_settings == [({"timeout_seconds": 3}, tmp_path, "http://localhost")]


def test_missing_source_aborts_whole_batch(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="ok\n", third="ok\n")
    engine = _ScriptedEngine()

    with pytest.raises(SourceAccessError, match="missing.http"):
        execute_batch_run(
            _request(tmp_path, paths["first"], str(tmp_path / "missing.http"), paths["third"]),
            engine=engine,
            stdin=io.StringIO(""),
        )
    assert len(engine.calls) == 1


def test_parse_failure_aborts_batch(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="parse-error\n", second="ok\n")
    engine = _ScriptedEngine()

    with pytest.raises(ParseFailure, match="unexpected token"):
        execute_batch_run(
            _request(tmp_path, paths["first"], paths["second"]),
            engine=engine,
            stdin=io.StringIO(""),
        )
    assert len(engine.calls) == 1


def test_json_output_written_after_each_run(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="ok\n", second="assert\n")
    output_path = tmp_path / "out.jsonl"

    execute_batch_run(
        _request(
            tmp_path,
            paths["first"],
            paths["second"],
            output_type=OutputType.JSON,
            output_path=output_path,
        ),
        engine=_ScriptedEngine(),
        stdin=io.StringIO(""),
    )

    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert '"success": true' in lines[0]
    assert '"kind": "assert"' in lines[1]


def test_injected_output_writer_receives_successful_bodies(tmp_path: Path) -> None:
    paths = _write_sources(tmp_path, first="ok\n", second="runner\n")
    stdout = io.BytesIO()

    execute_batch_run(
        _request(tmp_path, paths["first"], paths["second"]),
        engine=_ScriptedEngine(),
        stdin=io.StringIO(""),
        output_writer=RunOutputWriter(OutputType.RESPONSE_BODY, stdout=stdout),
    )

    assert stdout.getvalue() == b"body"


def test_collector_keeps_insertion_order_and_is_read_only() -> None:
    collector = RunRecordCollector()
    outcome = ExecutionOutcome(steps=(), time_in_ms=0, success=True)
    collector.append(RunRecord(content="a", source="a.http", outcome=outcome))
    collector.append(RunRecord(content="b", source="b.http", outcome=outcome))

    records = collector.records

    assert [record.source for record in records] == ["a.http", "b.http"]
    assert isinstance(records, tuple)
    assert len(collector) == 2
