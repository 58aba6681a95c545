"""GeneratedExerciseRunner — template for runners that test against random inputs."""

import copy
import inspect
import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from kata_eval.loader.domain.implementation import LoadedImplementation
from kata_eval.runner.domain.observer import RunnerObserver
from kata_eval.runner.domain.outcome import EvaluationFailure, FailureKind, RunnerOutcome
from kata_eval.runner.domain.result import Result
from kata_eval.runner.infrastructure.errors import InvocationError, ReflectionError

DEFAULT_CASE_COUNT = 10


class GeneratedExerciseRunner[InputT](ABC):
    """Base class for runners that generate inputs and compare against a reference.

    Subclasses declare the user-facing contract through class attributes and
    supply three hooks: generate_input, reference and, optionally, render_input.
    Satisfies the Runner protocol structurally.

    The first failure of any kind aborts the whole evaluation. get_results then
    returns [], while evaluate reports the cause as an EvaluationFailure.
    """

    exercise_id: ClassVar[str]
    class_name: ClassVar[str]
    method_name: ClassVar[str]
    return_type: ClassVar[type]

    def __init__(
        self,
        observer: RunnerObserver,
        rng: random.Random | None = None,
        case_count: int = DEFAULT_CASE_COUNT,
    ) -> None:
        if case_count < 1:
            raise ValueError(f"case_count must be positive, got {case_count}")
        self._observer = observer
        self._rng = rng if rng is not None else random.Random()
        self._case_count = case_count

    @property
    def case_count(self) -> int:
        return self._case_count

    @abstractmethod
    def generate_input(self, rng: random.Random) -> InputT:
        """Build one randomized input for a test case."""

    @abstractmethod
    def reference(self, case_input: InputT) -> Any:
        """Compute the trusted expected answer for case_input."""

    def render_input(self, case_input: InputT) -> str:
        return repr(case_input)

    def get_results(self, implementation: LoadedImplementation) -> list[Result]:
        return self.evaluate(implementation=implementation).results

    def evaluate(self, implementation: LoadedImplementation) -> RunnerOutcome:
        self._observer.runner_evaluation_started(
            exercise_id=self.exercise_id, case_count=self._case_count
        )
        try:
            results = self._run_cases(implementation=implementation)
        except ReflectionError as exc:
            return self._failed(kind="reflection", reason=str(exc))
        except InvocationError as exc:
            return self._failed(kind="invocation", reason=str(exc))
        except Exception as exc:  # noqa: BLE001
            return self._failed(kind="internal", reason=f"{type(exc).__name__}: {exc}")

        self._observer.runner_evaluation_completed(
            exercise_id=self.exercise_id,
            passed=sum(1 for result in results if result.passed),
            total=len(results),
        )
        return RunnerOutcome(results=results)

    def _failed(self, kind: FailureKind, reason: str) -> RunnerOutcome:
        self._observer.runner_evaluation_failed(
            exercise_id=self.exercise_id, kind=kind, reason=reason
        )
        return RunnerOutcome(
            results=[], failure=EvaluationFailure(kind=kind, reason=reason)
        )

    def _run_cases(self, implementation: LoadedImplementation) -> list[Result]:
        cls = self._resolve_class(implementation=implementation)
        results: list[Result] = []
        for case_index in range(self._case_count):
            case_input = self.generate_input(self._rng)
            # The user's code gets its own copy so it cannot alter what is
            # rendered or what the reference sees.
            actual = self._invoke(cls=cls, case_input=copy.deepcopy(case_input))
            result = Result(
                actual=actual,
                expected=self.reference(case_input),
                rendered_input=self.render_input(case_input),
            )
            self._observer.runner_case_evaluated(
                exercise_id=self.exercise_id,
                case_index=case_index,
                passed=result.passed,
            )
            results.append(result)
        return results

    def _resolve_class(self, implementation: LoadedImplementation) -> type:
        cls = implementation.find_class(self.class_name)
        if cls is None:
            raise ReflectionError(
                exercise_id=self.exercise_id,
                reason=f"class '{self.class_name}' not found",
            )
        _require_bindable(
            exercise_id=self.exercise_id,
            target=cls,
            args=(),
            what=f"constructor of '{self.class_name}'",
        )
        return cls

    def _invoke(self, cls: type, case_input: InputT) -> Any:
        try:
            instance = cls()
        except (Exception, SystemExit) as exc:  # noqa: BLE001
            raise InvocationError(
                exercise_id=self.exercise_id,
                reason=f"constructor raised {type(exc).__name__}: {exc}",
            ) from exc

        method = getattr(instance, self.method_name, None)
        if not callable(method):
            raise ReflectionError(
                exercise_id=self.exercise_id,
                reason=f"method '{self.method_name}' not found on '{self.class_name}'",
            )
        _require_bindable(
            exercise_id=self.exercise_id,
            target=method,
            args=(case_input,),
            what=f"method '{self.method_name}'",
        )

        try:
            actual = method(case_input)
        except (Exception, SystemExit) as exc:  # noqa: BLE001
            raise InvocationError(
                exercise_id=self.exercise_id,
                reason=f"'{self.method_name}' raised {type(exc).__name__}: {exc}",
            ) from exc

        if not isinstance(actual, self.return_type):
            raise ReflectionError(
                exercise_id=self.exercise_id,
                reason=(
                    f"'{self.method_name}' returned {type(actual).__name__},"
                    f" expected {self.return_type.__name__}"
                ),
            )
        return actual


def _require_bindable(
    exercise_id: str, target: Any, args: tuple[Any, ...], what: str
) -> None:
    """Raise ReflectionError unless target can be called with exactly args."""
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are called as-is.
        return
    try:
        signature.bind(*args)
    except TypeError as exc:
        raise ReflectionError(
            exercise_id=exercise_id,
            reason=f"{what} does not accept {len(args)} argument(s): {exc}",
        ) from exc
