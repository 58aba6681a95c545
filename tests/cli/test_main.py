"""Tests for the kata-eval CLI."""

import io
from pathlib import Path

from rich.console import Console
from typer.testing import CliRunner

from kata_eval.cli.main import _print_report, app
from kata_eval.evaluation.domain.report import EvaluationReport
from kata_eval.runner.domain.result import Result
from tests.project.workspace import (
    CORRECT_HAS_TRIPLE,
    add_exercise,
    make_config,
    write_user_code,
)

runner = CliRunner()


def _workspace(tmp_path: Path) -> Path:
    config = make_config(tmp_path)
    add_exercise(config)
    config_path = tmp_path / "kata-eval.yaml"
    config_path.write_text(
        "source_dir: source\ncode_dir: code\nledger_path: data.dat\n", encoding="utf-8"
    )
    return config_path


class TestList:
    def test_lists_discovered_exercises(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["list", str(_workspace(tmp_path))])

        assert result.exit_code == 0
        assert "HasTriple" in result.output
        assert "Arrays" in result.output

    def test_missing_config_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["list", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_invalid_log_format_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["list", str(_workspace(tmp_path)), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestShow:
    def test_prints_prompt_and_skeleton(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(_workspace(tmp_path)), "HasTriple"])

        assert result.exit_code == 0
        assert "Return True if three consecutive values are equal." in result.output
        assert "class HasTriple:" in result.output

    def test_unknown_exercise_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(_workspace(tmp_path)), "Nope"])

        assert result.exit_code == 1
        assert "Failed to find exercise" in result.output


class TestRun:
    def test_correct_code_exits_0(self, tmp_path: Path) -> None:
        config_path = _workspace(tmp_path)
        write_user_code(make_config(tmp_path), "HasTriple", CORRECT_HAS_TRIPLE)

        result = runner.invoke(
            app, ["run", str(config_path), "HasTriple", "--log-format", "json"]
        )

        assert result.exit_code == 0
        assert "10/10 passed" in result.output
        assert (tmp_path / "data.dat").exists()

    def test_missing_user_code_exits_1(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["run", str(_workspace(tmp_path)), "HasTriple"])

        assert result.exit_code == 1
        assert "Could not evaluate HasTriple" in result.output


class TestPrintReport:
    def test_unsaved_completion_prints_warning(self) -> None:
        report = EvaluationReport(
            exercise_id="HasTriple",
            results=[Result(actual=True, expected=True, rendered_input="[1, 1, 1]")],
            complete=False,
            completion_saved=False,
        )
        buffer = io.StringIO()

        _print_report(console=Console(file=buffer, width=120), report=report)

        assert "1/1 passed" in buffer.getvalue()
        assert "Could not record completion of HasTriple" in buffer.getvalue()

    def test_saved_completion_prints_no_warning(self) -> None:
        report = EvaluationReport(
            exercise_id="HasTriple",
            results=[Result(actual=True, expected=True, rendered_input="[1, 1, 1]")],
            complete=True,
        )
        buffer = io.StringIO()

        _print_report(console=Console(file=buffer, width=120), report=report)

        assert "Could not record completion" not in buffer.getvalue()
