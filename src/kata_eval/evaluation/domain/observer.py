"""EvaluationObserver port — domain events emitted while evaluating an exercise."""

from typing import Protocol


class EvaluationObserver(Protocol):
    def exercise_evaluation_started(self, exercise_id: str, source_path: str) -> None: ...

    def exercise_evaluation_completed(
        self, exercise_id: str, passed: int, total: int, complete: bool
    ) -> None: ...

    def exercise_evaluation_failed(
        self, exercise_id: str, kind: str, reason: str
    ) -> None: ...
