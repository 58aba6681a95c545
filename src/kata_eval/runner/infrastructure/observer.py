"""Structlog implementation of the RunnerObserver port."""

import structlog


class StructlogRunnerObserver:
    """Delegates runner domain events to structlog.

    Satisfies the RunnerObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def runner_evaluation_started(self, exercise_id: str, case_count: int) -> None:
        self._log.info(
            "runner.evaluation_started",
            exercise_id=exercise_id,
            case_count=case_count,
        )

    def runner_case_evaluated(
        self, exercise_id: str, case_index: int, passed: bool
    ) -> None:
        self._log.debug(
            "runner.case_evaluated",
            exercise_id=exercise_id,
            case_index=case_index,
            passed=passed,
        )

    def runner_evaluation_completed(
        self, exercise_id: str, passed: int, total: int
    ) -> None:
        self._log.info(
            "runner.evaluation_completed",
            exercise_id=exercise_id,
            passed=passed,
            total=total,
        )

    def runner_evaluation_failed(
        self, exercise_id: str, kind: str, reason: str
    ) -> None:
        self._log.error(
            "runner.evaluation_failed",
            exercise_id=exercise_id,
            kind=kind,
            reason=reason,
        )
