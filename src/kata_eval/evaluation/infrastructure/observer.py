"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def exercise_evaluation_started(self, exercise_id: str, source_path: str) -> None:
        self._log.info(
            "evaluation.started", exercise_id=exercise_id, source_path=source_path
        )

    def exercise_evaluation_completed(
        self, exercise_id: str, passed: int, total: int, complete: bool
    ) -> None:
        self._log.info(
            "evaluation.completed",
            exercise_id=exercise_id,
            passed=passed,
            total=total,
            complete=complete,
        )

    def exercise_evaluation_failed(
        self, exercise_id: str, kind: str, reason: str
    ) -> None:
        self._log.error(
            "evaluation.failed", exercise_id=exercise_id, kind=kind, reason=reason
        )
