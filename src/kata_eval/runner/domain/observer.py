"""RunnerObserver port — domain events emitted while a runner evaluates code."""

from typing import Protocol


class RunnerObserver(Protocol):
    """Observer port for runner domain events.

    Implementations may log to structlog or record for tests.
    """

    def runner_evaluation_started(self, exercise_id: str, case_count: int) -> None: ...

    def runner_case_evaluated(
        self, exercise_id: str, case_index: int, passed: bool
    ) -> None: ...

    def runner_evaluation_completed(
        self, exercise_id: str, passed: int, total: int
    ) -> None: ...

    def runner_evaluation_failed(
        self, exercise_id: str, kind: str, reason: str
    ) -> None: ...
