"""ExerciseEvaluator — loads a user's code, runs its exercise, and records completion."""

from kata_eval.evaluation.domain.observer import EvaluationObserver
from kata_eval.evaluation.domain.report import EvaluationReport
from kata_eval.loader.domain.loader import ArtifactLoader
from kata_eval.loader.infrastructure.errors import ArtifactLoadError
from kata_eval.project.application.repository import ProjectRepository
from kata_eval.runner.domain.outcome import EvaluationFailure
from kata_eval.runner.infrastructure.registry import RunnerRegistry


class ExerciseEvaluator:
    """Evaluates one exercise at a time against the user's current source.

    The user's file is loaded afresh on every call, so edits are always seen.
    The runner is looked up in the registry the repository filled during its
    last scan. A project is marked complete only when every case passes and
    the ledger write succeeds; a later failing evaluation does not clear the
    flag.
    """

    def __init__(
        self,
        repository: ProjectRepository,
        runner_registry: RunnerRegistry,
        loader: ArtifactLoader,
        observer: EvaluationObserver,
    ) -> None:
        self._repository = repository
        self._runner_registry = runner_registry
        self._loader = loader
        self._observer = observer

    def evaluate(self, exercise_id: str) -> EvaluationReport:
        """Evaluate the user's code for exercise_id.

        Load and runner failures are reported through EvaluationReport.failure
        with empty results; they are never raised.

        Raises:
            ProjectNotFoundError: if exercise_id is not a discovered project.
            RunnerNotFoundError: if no runner is registered for exercise_id.
        """
        project = self._repository.get(exercise_id)
        runner = self._runner_registry.get(exercise_id)
        self._observer.exercise_evaluation_started(
            exercise_id=exercise_id, source_path=str(project.source_path)
        )

        try:
            implementation = self._loader.load(artifact_path=project.source_path)
        except ArtifactLoadError as exc:
            return self._failed(
                exercise_id=exercise_id,
                failure=EvaluationFailure(kind="load", reason=str(exc)),
                complete=project.complete,
            )

        outcome = runner.evaluate(implementation=implementation)
        if outcome.failure is not None:
            return self._failed(
                exercise_id=exercise_id,
                failure=outcome.failure,
                complete=project.complete,
            )

        report = EvaluationReport(
            exercise_id=exercise_id,
            results=outcome.results,
            complete=project.complete,
        )
        if report.all_passed:
            saved = self._repository.set_complete(project=project, complete=True)
            report = report.model_copy(
                update={"complete": project.complete, "completion_saved": saved}
            )

        self._observer.exercise_evaluation_completed(
            exercise_id=exercise_id,
            passed=report.passed,
            total=report.total,
            complete=report.complete,
        )
        return report

    def _failed(
        self, exercise_id: str, failure: EvaluationFailure, complete: bool
    ) -> EvaluationReport:
        self._observer.exercise_evaluation_failed(
            exercise_id=exercise_id, kind=failure.kind, reason=failure.reason
        )
        return EvaluationReport(
            exercise_id=exercise_id, results=[], failure=failure, complete=complete
        )
