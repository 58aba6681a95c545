"""RunnerRegistry — maps exercise ids to their Runner instances."""

import inspect

from kata_eval.loader.domain.implementation import LoadedImplementation
from kata_eval.runner.domain.observer import RunnerObserver
from kata_eval.runner.domain.runner import Runner
from kata_eval.runner.infrastructure.errors import (
    RunnerContractError,
    RunnerNotFoundError,
)

_RUNNER_CLASS_SUFFIX = "Runner"
_REQUIRED_METHODS = ("get_results", "evaluate")


class RunnerRegistry:
    """Lookup table for runners, keyed by exercise id.

    Reloading an exercise means building a new runner and registering it
    again; the new entry replaces the old one.
    """

    def __init__(self) -> None:
        self._runners: dict[str, Runner] = {}

    def register(self, runner: Runner) -> None:
        self._runners[runner.exercise_id] = runner

    def get(self, exercise_id: str) -> Runner:
        """Return the runner for exercise_id.

        Raises:
            RunnerNotFoundError: if nothing is registered under exercise_id.
        """
        if exercise_id not in self._runners:
            raise RunnerNotFoundError(exercise_id=exercise_id)
        return self._runners[exercise_id]

    def remove(self, exercise_id: str) -> None:
        self._runners.pop(exercise_id, None)

    def clear(self) -> None:
        self._runners.clear()

    def exercise_ids(self) -> list[str]:
        return sorted(self._runners)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._runners

    def __len__(self) -> int:
        return len(self._runners)


def create_runner(
    exercise_id: str,
    artifact: LoadedImplementation,
    observer: RunnerObserver,
) -> Runner:
    """Instantiate the ``<exercise_id>Runner`` class defined by a runner artifact.

    The class must accept ``observer`` as a keyword argument, expose an
    ``exercise_id`` equal to exercise_id, and provide get_results and evaluate.

    Raises:
        RunnerContractError: if the class is missing or does not satisfy the contract.
    """
    class_name = f"{exercise_id}{_RUNNER_CLASS_SUFFIX}"
    runner_cls = artifact.find_class(class_name)
    if runner_cls is None:
        raise RunnerContractError(
            exercise_id=exercise_id, reason=f"class '{class_name}' not found"
        )
    if inspect.isabstract(runner_cls):
        raise RunnerContractError(
            exercise_id=exercise_id, reason=f"class '{class_name}' is abstract"
        )
    missing = [
        name for name in _REQUIRED_METHODS if not callable(getattr(runner_cls, name, None))
    ]
    if missing:
        raise RunnerContractError(
            exercise_id=exercise_id,
            reason=f"class '{class_name}' lacks {', '.join(missing)}",
        )

    try:
        runner: Runner = runner_cls(observer=observer)
    except Exception as exc:  # noqa: BLE001
        raise RunnerContractError(
            exercise_id=exercise_id,
            reason=f"constructing '{class_name}' raised {type(exc).__name__}: {exc}",
        ) from exc

    declared_id = getattr(runner, "exercise_id", None)
    if declared_id != exercise_id:
        raise RunnerContractError(
            exercise_id=exercise_id,
            reason=f"'{class_name}' declares exercise_id {declared_id!r}",
        )
    return runner
