"""CLI entrypoint for kata-eval — typer app with `list`, `show` and `run` commands."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kata_eval.config.infrastructure.observer import StructlogConfigObserver
from kata_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from kata_eval.core.errors import KataEvalError
from kata_eval.evaluation.application.evaluator import ExerciseEvaluator
from kata_eval.evaluation.domain.report import EvaluationReport
from kata_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from kata_eval.loader.infrastructure.module_loader import ModuleArtifactLoader
from kata_eval.loader.infrastructure.observer import StructlogLoaderObserver
from kata_eval.project.application.repository import ProjectRepository
from kata_eval.project.infrastructure.file_ledger import DelimitedFileLedger
from kata_eval.project.infrastructure.observer import StructlogProjectObserver
from kata_eval.project.infrastructure.yaml_descriptor import YamlDescriptorLoader
from kata_eval.runner.infrastructure.observer import StructlogRunnerObserver
from kata_eval.runner.infrastructure.registry import RunnerRegistry

app = typer.Typer(add_completion=False)

_CONFIG_ARGUMENT = typer.Argument(..., help="Path to the kata-eval workspace YAML")
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _build_repository(
    config_path: Path, loader: ModuleArtifactLoader, runner_registry: RunnerRegistry
) -> ProjectRepository:
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    repository = ProjectRepository(
        config=config,
        loader=loader,
        descriptor_loader=YamlDescriptorLoader(),
        ledger=DelimitedFileLedger(path=config.ledger_path),
        runner_registry=runner_registry,
        observer=StructlogProjectObserver(),
        runner_observer=StructlogRunnerObserver(),
    )
    repository.discover()
    return repository


def _print_report(console: Console, report: EvaluationReport) -> None:
    if report.failure is not None:
        console.print(
            f"[red]Could not evaluate {report.exercise_id}[/red]"
            f" ({report.failure.kind}): {escape(report.failure.reason)}"
        )
        return

    table = Table(title=report.exercise_id)
    table.add_column("#", justify="right")
    table.add_column("Input")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Result")
    for index, result in enumerate(report.results, start=1):
        verdict = "[green]pass[/green]" if result.passed else "[red]FAIL[/red]"
        table.add_row(
            str(index),
            escape(result.rendered_input),
            escape(repr(result.expected)),
            escape(repr(result.actual)),
            verdict,
        )
    console.print(table)
    color = "green" if report.all_passed else "yellow"
    console.print(f"[{color}]{report.passed}/{report.total} passed[/{color}]")
    if not report.completion_saved:
        console.print(
            f"[yellow]Could not record completion of {report.exercise_id}[/yellow]"
        )


@app.command("list")
def list_exercises(
    config_path: Path = _CONFIG_ARGUMENT,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """List every discovered exercise with its category and completion state."""
    _configure_structlog(log_format=log_format)
    try:
        loader = ModuleArtifactLoader(observer=StructlogLoaderObserver())
        repository = _build_repository(
            config_path=config_path, loader=loader, runner_registry=RunnerRegistry()
        )
    except KataEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    table = Table()
    table.add_column("Exercise")
    table.add_column("Category")
    table.add_column("Difficulty")
    table.add_column("Complete")
    for project in repository.projects():
        table.add_row(
            project.exercise_id,
            project.properties.category,
            project.properties.difficulty or "-",
            "yes" if project.complete else "no",
        )
    Console().print(table)


@app.command()
def show(
    config_path: Path = _CONFIG_ARGUMENT,
    exercise_id: str = typer.Argument(..., help="Exercise id, e.g. HasTriple"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Print an exercise's prompt and the user's current code."""
    _configure_structlog(log_format=log_format)
    try:
        loader = ModuleArtifactLoader(observer=StructlogLoaderObserver())
        repository = _build_repository(
            config_path=config_path, loader=loader, runner_registry=RunnerRegistry()
        )
        project = repository.get(exercise_id)
    except KataEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(project.properties.prompt.rstrip())
    typer.echo("")
    typer.echo(repository.current_code(project).rstrip())


@app.command()
def run(
    config_path: Path = _CONFIG_ARGUMENT,
    exercise_id: str = typer.Argument(..., help="Exercise id, e.g. HasTriple"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Evaluate the user's code for one exercise. Exits 1 unless every case passes."""
    _configure_structlog(log_format=log_format)
    try:
        loader = ModuleArtifactLoader(observer=StructlogLoaderObserver())
        runner_registry = RunnerRegistry()
        repository = _build_repository(
            config_path=config_path, loader=loader, runner_registry=runner_registry
        )
        evaluator = ExerciseEvaluator(
            repository=repository,
            runner_registry=runner_registry,
            loader=loader,
            observer=StructlogEvaluationObserver(),
        )
        report = evaluator.evaluate(exercise_id)
    except KataEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _print_report(console=Console(), report=report)
    if not report.all_passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
