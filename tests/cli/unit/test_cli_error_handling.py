"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from simple_http_tester import cli as cli_module
from simple_http_tester.cli import main
from simple_http_tester.execution import EngineLoadError


def test_unknown_option_is_a_command_line_error(capsys) -> None:
    exit_code = main(["run", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_variable_is_a_command_line_error(capsys, tmp_path: Path) -> None:
    source = tmp_path / "a.http"
    source.write_text("GET http://localhost\n", encoding="utf-8")

    exit_code = main(["run", str(source), "--variable", "novalue", "--engine", "json:dumps"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "name=value" in captured.err
    assert "Traceback" not in captured.err


def test_missing_engine_is_a_command_line_error(capsys, monkeypatch, tmp_path: Path) -> None:
    source = tmp_path / "a.http"
    source.write_text("GET http://localhost\n", encoding="utf-8")

    def failing_load_engine(reference):
        raise EngineLoadError("No execution engine available")

    monkeypatch.setattr(cli_module, "load_engine", failing_load_engine)

    exit_code = main(["run", str(source)])

    assert exit_code == 1
    assert capsys.readouterr().err.strip() == "error: No execution engine available"


def test_invalid_configuration_is_a_command_line_error(capsys, tmp_path: Path) -> None:
    config = tmp_path / "http-tester.yaml"
    config.write_text("smtp: {}\n", encoding="utf-8")

    exit_code = main(["run", "a.http", "--config", str(config)])

    assert exit_code == 1
    assert "Unknown configuration sections" in capsys.readouterr().err


def test_generate_config_refuses_to_overwrite(capsys, tmp_path: Path) -> None:
    destination = tmp_path / "http-tester.yaml"
    destination.write_text("", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(destination)])

    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err


def test_unreadable_configuration_is_a_command_line_error(capsys, tmp_path: Path) -> None:
    config = tmp_path / "http-tester.yaml"
    config.write_bytes("variables:\n  city: Montréal\n".encode("latin-1"))

    exit_code = main(["run", "a.http", "--config", str(config)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot read configuration file" in captured.err
    assert "Traceback" not in captured.err
